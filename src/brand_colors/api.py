"""HTTP API for deriving brand colors."""

from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from .commands import (
    CatalogParams,
    ClassifyParams,
    ClassifyResponse,
    CommandError,
    ContrastParams,
    DeriveParams,
    DeriveResponse,
    ParseParams,
    PresetParams,
    check_colors,
    classify_palette,
    derive_mapping,
    generate_preset,
    list_catalog,
    parse_palette,
)
from .runtime import ConfigurationError, application_services
from .styles import StyleCache


class DeriveRequest(BaseModel):
    colors: List[str] = Field(default_factory=list)
    style: Optional[str] = None
    section_hint: Optional[str] = None
    palette_id: Optional[str] = None


class ClassifyRequest(BaseModel):
    colors: List[str] = Field(default_factory=list)
    section_hint: Optional[str] = None
    palette_id: Optional[str] = None


class ContrastRequest(BaseModel):
    foreground: str
    background: str
    font_size: float = 16


class ParseRequest(BaseModel):
    text: str


class PresetRequest(BaseModel):
    colors: List[str]
    preset: str = "original"


class BrandColorMappingModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    background: str
    text: str
    primary: str
    accent: str
    surface: str
    surfaces: List[str]
    source_palette: List[str]


class MappingValidationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text_background: float
    primary_background: float
    accent_background: float
    passes_aa: bool
    meets_requirements: bool


class DeriveResponseModel(BaseModel):
    mapping: BrandColorMappingModel
    style: Optional[str] = None
    valid_colors: int
    validation: MappingValidationModel

    @classmethod
    def from_result(cls, result: DeriveResponse) -> "DeriveResponseModel":
        return cls(
            mapping=BrandColorMappingModel.model_validate(result.mapping),
            style=result.style,
            valid_colors=result.valid_colors,
            validation=MappingValidationModel.model_validate(result.validation),
        )


class ColorStatsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    avg_hue: float
    avg_saturation: float
    avg_lightness: float
    max_saturation: float
    min_lightness: float
    max_lightness: float
    warm_ratio: float
    neutral_ratio: float
    light_ratio: float
    dark_ratio: float
    color_count: int


class ClassifyResponseModel(BaseModel):
    style: str
    label: str
    valid_colors: int
    stats: Optional[ColorStatsModel] = None

    @classmethod
    def from_result(cls, result: ClassifyResponse) -> "ClassifyResponseModel":
        return cls(
            style=result.style,
            label=result.label,
            valid_colors=result.valid_colors,
            stats=ColorStatsModel.model_validate(result.stats) if result.stats else None,
        )


class ContrastResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    foreground: str
    background: str
    ratio: float
    aa: bool
    aaa: bool
    level: Literal["AAA", "AA", "fail"]


class ParseResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    colors: List[str]
    error: Optional[str] = None


class StyledPaletteModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    section_id: str
    section_name: str
    style: str
    colors: List[str]


class CatalogResponseModel(BaseModel):
    palettes: List[StyledPaletteModel]


class PresetPaletteModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    primary: str
    accent: str
    background: str
    text: str


class PresetResponseModel(BaseModel):
    preset: str
    label: str
    palette: PresetPaletteModel


def get_services(request: Request):
    style_cache = getattr(request.app.state, "style_cache", None)
    try:
        with application_services(style_cache=style_cache) as services:
            yield services
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def create_app(*, style_cache: Optional[StyleCache] = None) -> FastAPI:
    app = FastAPI(title="Brand Colors API")
    app.state.style_cache = style_cache or StyleCache()

    @app.post("/derive", response_model=DeriveResponseModel)
    def run_derive(request: DeriveRequest, services=Depends(get_services)) -> DeriveResponseModel:
        try:
            result = derive_mapping(
                services,
                DeriveParams(
                    colors=request.colors,
                    style=request.style,
                    section_hint=request.section_hint,
                    palette_id=request.palette_id,
                ),
            )
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return DeriveResponseModel.from_result(result)

    @app.post("/classify", response_model=ClassifyResponseModel)
    def run_classify(
        request: ClassifyRequest, services=Depends(get_services)
    ) -> ClassifyResponseModel:
        try:
            result = classify_palette(
                services,
                ClassifyParams(
                    colors=request.colors,
                    section_hint=request.section_hint,
                    palette_id=request.palette_id,
                ),
            )
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ClassifyResponseModel.from_result(result)

    @app.post("/contrast", response_model=ContrastResponseModel)
    def run_contrast(request: ContrastRequest) -> ContrastResponseModel:
        try:
            result = check_colors(
                ContrastParams(
                    foreground=request.foreground,
                    background=request.background,
                    font_size=request.font_size,
                )
            )
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ContrastResponseModel.model_validate(result)

    @app.post("/parse", response_model=ParseResponseModel)
    def run_parse(request: ParseRequest) -> ParseResponseModel:
        return ParseResponseModel.model_validate(parse_palette(ParseParams(text=request.text)))

    @app.post("/preset", response_model=PresetResponseModel)
    def run_preset(request: PresetRequest) -> PresetResponseModel:
        try:
            result = generate_preset(PresetParams(colors=request.colors, preset=request.preset))
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PresetResponseModel(
            preset=result.preset,
            label=result.label,
            palette=PresetPaletteModel.model_validate(result.palette),
        )

    @app.get("/catalog", response_model=CatalogResponseModel)
    def run_catalog(
        style: Optional[str] = Query(None, description="Only include palettes of this style"),
        section: Optional[str] = Query(None, description="Only include this section id"),
        services=Depends(get_services),
    ) -> CatalogResponseModel:
        try:
            result = list_catalog(services, CatalogParams(style=style, section=section))
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return CatalogResponseModel(
            palettes=[StyledPaletteModel.model_validate(item) for item in result.palettes]
        )

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    from .config import load_config

    config = load_config()
    uvicorn.run("brand_colors.api:app", host=config.api_host, port=config.api_port, reload=False)
