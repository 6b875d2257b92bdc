"""Line-oriented rendering of a merged help model."""

from __future__ import annotations

from typing import List, Sequence

from .formatters import ParameterNameFormatter
from .models import DocParameter, HelpModel, MergedParameter

SYNTAX_HEADER = "Command syntax"
PARAMETERS_HEADER = "Parameters"


class HelpRenderer:
    """Turns a ``HelpModel`` into the lines of a help document."""

    def render(self, formatter: ParameterNameFormatter, model: HelpModel) -> List[str]:
        lines: List[str] = ["", model.title]

        if model.description:
            lines.append("")
            for paragraph in model.description:
                lines.append("")
                lines.append(paragraph)

        lines.extend(["", "", SYNTAX_HEADER])
        for pset in model.parameter_sets:
            lines.append("")
            lines.append(self.syntax_line(formatter, model.invocation, pset))

        if model.parameters:
            lines.extend(["", "", PARAMETERS_HEADER, ""])
            separate = any(p.description for p in model.parameters.values())
            for parameter in model.parameters.values():
                lines.extend(self.parameter_block(formatter, parameter))
                if separate:
                    lines.append("")

        lines.append("")
        return lines

    @staticmethod
    def syntax_line(
        formatter: ParameterNameFormatter,
        invocation: str,
        parameters: Sequence[DocParameter],
    ) -> str:
        tokens = [invocation]
        tokens.extend(
            formatter(p.name, p.type_label, p.is_mandatory, p.is_positional)
            for p in parameters
        )
        return " ".join(tokens)

    @staticmethod
    def parameter_block(
        formatter: ParameterNameFormatter, parameter: MergedParameter
    ) -> List[str]:
        # Reference entries are not syntax positions: always mandatory, never positional.
        heading = formatter(parameter.name, None, True, False)
        if parameter.aliases:
            aliases = ", ".join(formatter(alias, None, True, False) for alias in parameter.aliases)
            heading = f"{heading}, {aliases}"
        return [heading, *parameter.description]


__all__ = ["HelpRenderer", "PARAMETERS_HEADER", "SYNTAX_HEADER"]
