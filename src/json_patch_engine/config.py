from pydantic import BaseModel, ConfigDict, Field


class PatchConfig(BaseModel):
    """
    Configuration of a JSON patcher. Immutable once built, so a single instance
    can be shared by patchers working on different documents.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_path_exists: bool = Field(
        default=True,
        description="""Fail when an operation addresses a path that does not exist.
        When disabled, such operations are skipped.""",
    )
    support_negative_array_index: bool = Field(
        default=False,
        description="Accept negative array indices counted from the end of the array.",
    )
    json_prefix: str = Field(
        default="",
        description="Prefix for every output line after the first. Only used when applying to serialized documents.",
    )
    json_indent: str = Field(
        default="",
        description="Indentation unit of the output. Only used when applying to serialized documents.",
    )
    json_escape_html: bool = Field(
        default=False,
        description="Escape '<', '>' and '&' in the output. Only used when applying to serialized documents.",
    )
    sort_keys: bool = Field(
        default=False,
        description="Sort object keys in the output instead of keeping insertion order.",
    )
