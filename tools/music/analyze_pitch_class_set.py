"""
analyze_pitch_class_set tool - describe a pitch class set.

Pure computation: no LLM, no DB, no I/O.
Given a chroma, a pcnum, a list of notes or a list of intervals, returns:
  - pcnum, chroma, normalized chroma
  - Interval names and member note names
  - Cardinality
  - Modes (rotations of the chroma)
"""

import re
from typing import Any

from pcset.catalog import modes
from pcset.properties import PcsetBuilder, default_builder
from tools.base import TheoryTool, ToolParameter, ToolResult

# Names in a free-text list are separated by commas and/or whitespace
_LIST_SEPARATOR = re.compile(r"[,\s]+")


def _split_names(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    names = [name for name in _LIST_SEPARATOR.split(raw.strip()) if name]
    return names or None


class AnalyzePitchClassSet(TheoryTool):
    """
    Describe a pitch class set given in any supported form.

    Input fields follow the constructor precedence: chroma, then pcnum,
    then notes, then intervals. If none is valid the tool fails with the
    invalid-constructor message instead of describing the empty set.

    Args:
        builder: Builder to construct sets with (default: the shared builder)
    """

    def __init__(self, builder: PcsetBuilder | None = None) -> None:
        self._builder = builder

    @property
    def builder(self) -> PcsetBuilder:
        return self._builder or default_builder()

    @property
    def name(self) -> str:
        return "analyze_pitch_class_set"

    @property
    def parameters(self) -> tuple[ToolParameter, ...]:
        return (
            ToolParameter(
                name="chroma",
                type=str,
                description="12-character binary string, index 0 = C, e.g. '101011010101'.",
            ),
            ToolParameter(
                name="pcnum",
                type=int,
                description="Numeric id of the set, 0-4095 (the chroma read as binary).",
            ),
            ToolParameter(
                name="notes",
                type=str,
                description="Note names separated by commas or spaces, e.g. 'C, E, G'.",
            ),
            ToolParameter(
                name="intervals",
                type=str,
                description="Interval names separated by commas or spaces, e.g. '1P 3m 5P'.",
            ),
            ToolParameter(
                name="normalized_modes",
                type=bool,
                description="Only list modes that start on a member. Default: true.",
                default=True,
            ),
        )

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Build the set and describe it.

        Returns:
            ToolResult with the property record, note names and modes;
            metadata names the input field that was used.
        """
        result = self.builder.build(
            chroma=kwargs["chroma"],
            pcnum=kwargs["pcnum"],
            notes=_split_names(kwargs["notes"]),
            intervals=_split_names(kwargs["intervals"]),
        )
        if not result.ok:
            return ToolResult.failure(
                "No valid pitch class set given. Provide a 12-digit binary chroma, "
                "a pcnum 0-4095, note names or interval names."
            )

        properties = result.properties
        return ToolResult(
            success=True,
            data={
                **properties.to_dict(),
                "note_names": list(self.builder.note_names(properties)),
                "modes": modes(properties, kwargs["normalized_modes"], builder=self.builder),
            },
            metadata={"matched": result.matched},
        )
