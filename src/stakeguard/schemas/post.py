# src/stakeguard/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PostCreate(BaseModel):
    """Schema for registering a new post."""

    content_ref_hex: str = Field(
        ...,
        min_length=2,
        max_length=128,
        description="Hex-encoded content reference, at most 64 bytes",
    )

    @field_validator("content_ref_hex")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        try:
            bytes.fromhex(value)
        except ValueError as err:
            raise ValueError("content_ref_hex must be valid hex") from err
        return value.lower()

    @property
    def content_ref(self) -> bytes:
        """Return the decoded content reference."""
        return bytes.fromhex(self.content_ref_hex)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author: str
    content_ref_hex: str
    created_at: int
    status: str
    report_count: int

    @model_validator(mode="before")
    @classmethod
    def _encode_content_ref(cls, data: object) -> object:
        if not isinstance(data, dict):
            extracted: dict[str, object | None] = {}
            for field_name in cls.model_fields:
                extracted[field_name] = getattr(data, field_name, None)
            extracted["content_ref_hex"] = getattr(data, "content_ref", b"")
            data = extracted

        content_ref = data.get("content_ref_hex")
        if isinstance(content_ref, bytes | bytearray):
            data["content_ref_hex"] = bytes(content_ref).hex()
        return data
