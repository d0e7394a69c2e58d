from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    # Unknown keys are ignored so new API fields never break decoding.
    # Renamed fields only match their wire key.
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")
