from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeUrlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    message: str = ""
    file_type: str = Field(default="image", alias="fileType")


class AnalysisResponse(BaseModel):
    analysis: str = Field(
        description="The AI generated analysis of the image or file."
    )
