from pydantic import BaseModel, ConfigDict


class SeoMetadata(BaseModel):
    """Page-level metadata shared by every rendered page."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = "Pad Print"
    description: str = ""
    url: str = ""
    image: str = ""
