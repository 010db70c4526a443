from typing import Literal

from pydantic import Field

from models.responses import CamelModel

ATSVendor = Literal["auto", "workday", "greenhouse", "lever", "icims", "taleo"]
Industry = Literal["general", "technology", "finance", "healthcare"]


class ATSAnalysisRequest(CamelModel):
    # Defaults to "" so a missing CV is rejected as too short (400), not as a schema error
    cv_text: str = Field("", max_length=50000, description="Plain text CV content")
    job_description: str | None = Field(None, max_length=10000, description="Job description text")
    file_name: str | None = Field(None, max_length=255)
    file_size: int | None = Field(None, ge=0, description="Upload size in bytes")
    analysis_mode: Literal["basic", "enterprise"] = "basic"
    target_ats: ATSVendor = Field("auto", alias="targetATS")
    industry: Industry = "general"


class KeywordExtractionRequest(CamelModel):
    job_description: str = Field("", max_length=10000)
    market: str = "global"


class CoverLetterRequest(CamelModel):
    template: str = ""
    tone: str = ""
    company: str = Field("", max_length=200)
    position: str = Field("", max_length=200)
    applicant_name: str = Field("", max_length=200)
    background: str = Field("", max_length=5000)
    achievements: list[str] = []
    job_description: str | None = Field(None, max_length=10000)
    custom_instructions: str | None = Field(None, max_length=2000)
    include_address: bool = False
    user_address: str | None = None
    user_phone: str | None = None
