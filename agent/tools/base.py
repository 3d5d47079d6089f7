"""
Operation descriptors and tool response types.

An Operation is the immutable record the generic dispatch pipeline is
parameterized by: argument model, upstream model id, latency class,
result kind, filename defaults and result messages.

Enforces:
- One argument model per operation (validation and advertised schema agree)
- Operations never change after import
- Tool responses carry exactly one text message and an error flag
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class LatencyClass(str, Enum):
    """Expected upstream latency, selects the timeout budget."""

    SHORT = "short"
    LONG = "long"


class MediaKind(str, Enum):
    """Kind of artifact an operation produces, selects the extractor."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    MODEL_3D = "3d"


class ToolArgs(BaseModel):
    """
    Base for operation argument models.

    Strict: no string-to-number coercion. Unknown fields are ignored so
    newer hosts can send extra keys without breaking older servers.
    """

    model_config = ConfigDict(strict=True, extra="ignore", protected_namespaces=())


def _whole_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Integer that also accepts whole-number floats (2.0). Fractions, strings
# and booleans are still rejected.
WholeNumber = Annotated[int, BeforeValidator(_whole_float_to_int)]


def save_path_field(description: str) -> Any:
    """The optional output path every operation accepts."""
    return Field(default=None, description=description)


class ToolInputSchema(BaseModel):
    """JSON-schema object advertised to the host for one operation."""

    type: str = "object"
    properties: Dict[str, Dict[str, Any]] = {}
    required: List[str] = []


class ToolResponse(BaseModel):
    """
    Result of one tool call.

    Invariants:
    - text is always set (success message or error message)
    - is_error=True for every failure, False otherwise
    """

    text: str
    is_error: bool = False
    execution_time_ms: int = 0


def _simplify_property(prop: Dict[str, Any]) -> Dict[str, Any]:
    """Collapse pydantic's Optional[X] rendering into a plain X schema."""
    prop = {k: v for k, v in prop.items() if k != "title"}
    if prop.get("default", ...) is None:
        del prop["default"]

    variants = [v for v in prop.pop("anyOf", []) if v.get("type") != "null"]
    if len(variants) == 1:
        prop = {**variants[0], **prop}
    elif variants:
        prop["anyOf"] = variants
    return prop


def render_input_schema(args_model: Type[BaseModel]) -> ToolInputSchema:
    """Build the host-facing schema from an argument model."""
    schema = args_model.model_json_schema()
    return ToolInputSchema(
        properties={
            name: _simplify_property(prop)
            for name, prop in schema.get("properties", {}).items()
        },
        required=list(schema.get("required", [])),
    )


@dataclass(frozen=True)
class Operation:
    """
    One generative-media capability.

    prefix/extension feed auto-derived file names; format_field names an
    argument (e.g. output_format) whose value overrides the extension.

    inspection operations report the raw upstream payload instead of failing
    when no artifact comes back; auto_save=False means an artifact is only
    written when the caller asked for a path.
    """

    name: str
    description: str
    args_model: Type[ToolArgs]
    model_id: str
    latency: LatencyClass
    kind: MediaKind
    prefix: str
    extension: str
    saved_message: str
    empty_message: str
    format_field: Optional[str] = None
    inspection: bool = False
    auto_save: bool = True

    def input_schema(self) -> ToolInputSchema:
        return render_input_schema(self.args_model)

    def extension_for(self, args: BaseModel) -> str:
        if self.format_field:
            value = getattr(args, self.format_field, None)
            if value:
                return str(value)
        return self.extension
