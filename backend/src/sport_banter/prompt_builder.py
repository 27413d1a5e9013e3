"""
Assembles the generation prompt. Pure string work, no I/O.
"""

from typing import List, Optional

from .models import MatchSummary, RequestContext, ResolvedTarget
from .prompts import (
    BANTER_PERSONA,
    GENERAL_COMMENTARY_INSTRUCTION,
    MATCH_CONTEXT_INSTRUCTION,
    RESPONSE_STRUCTURE,
)


class PromptBuilder:

    def build(
        self,
        ctx: RequestContext,
        target: ResolvedTarget,
        match_summary: Optional[MatchSummary],
        style: str,
    ) -> str:
        """
        Build the commentary prompt.

        Args:
            ctx: Incoming request
            target: Resolved focus team and date
            match_summary: Match context, None switches to general commentary
            style: Tone directive from ToneResolver

        Returns:
            Complete prompt string
        """
        prompt_parts: List[str] = []

        prompt_parts.append(BANTER_PERSONA.format(sport=ctx.sport))
        prompt_parts.append(f"Tone: {style}")
        prompt_parts.append("")

        if match_summary is not None:
            prompt_parts.append(MATCH_CONTEXT_INSTRUCTION)
        else:
            prompt_parts.append(GENERAL_COMMENTARY_INSTRUCTION)
        prompt_parts.append("")

        prompt_parts.append(f'User message: "{ctx.user_message}"')
        if target.focus_team:
            prompt_parts.append(f"Focus team: {target.focus_team}")
        if match_summary is not None:
            prompt_parts.append(f"Match: {match_summary.format_for_prompt()}")
        prompt_parts.append("")

        prompt_parts.append(RESPONSE_STRUCTURE)

        return "\n".join(prompt_parts)
