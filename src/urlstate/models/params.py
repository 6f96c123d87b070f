"""Tree-shaped parameter values for nested bracket keys.

``a[b][c]=v`` decodes to ``ParamNode{a: ParamNode{b: ParamNode{c: ParamLeaf(v)}}}``.
"""

from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union
from pydantic import BaseModel, Field


def coerce_scalar(value: Optional[Any]) -> str:
    """Stringify a parameter value: booleans lowercase, None as ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class ParamLeaf(BaseModel):
    """A terminal string value."""

    kind: Literal["leaf"] = "leaf"
    value: str = Field(..., description="Decoded parameter value")


class ParamNode(BaseModel):
    """An ordered mapping from key to nested parameter value."""

    kind: Literal["node"] = "node"
    children: Dict[str, "ParamValue"] = Field(
        default_factory=dict, description="Child values in insertion order"
    )

    def to_python(self) -> Dict[str, Any]:
        """Convert to plain nested dicts of strings."""
        return {
            key: child.to_python() if isinstance(child, ParamNode) else child.value
            for key, child in self.children.items()
        }

    @classmethod
    def from_python(cls, data: Mapping[str, Any]) -> "ParamNode":
        """Build a tree from plain nested mappings.

        Nested mappings become nodes; every other value is stringified.
        """
        node = cls()
        for key, value in data.items():
            if isinstance(value, (ParamLeaf, ParamNode)):
                node.children[str(key)] = value
            elif isinstance(value, Mapping):
                node.children[str(key)] = cls.from_python(value)
            else:
                node.children[str(key)] = ParamLeaf(value=coerce_scalar(value))
        return node


ParamValue = Annotated[Union[ParamLeaf, ParamNode], Field(discriminator="kind")]

ParamNode.model_rebuild()
