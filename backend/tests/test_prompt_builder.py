import pytest

from sport_banter.models import MatchSummary, RequestContext, ResolvedTarget
from sport_banter.prompt_builder import PromptBuilder
from sport_banter.prompts import GENERAL_COMMENTARY_INSTRUCTION, MATCH_CONTEXT_INSTRUCTION, MOODS
from sport_banter.tone import ToneResolver


@pytest.fixture
def summary():
    return MatchSummary.model_validate({
        "strEvent": "Liverpool vs Tottenham",
        "intHomeScore": "4",
        "intAwayScore": "2",
        "dateEvent": "2024-05-08",
    })


def test_explicit_mood_wins():
    assert ToneResolver().resolve("roast", "hype") == MOODS["roast"]


def test_inferred_mood_used_without_explicit_one():
    assert ToneResolver().resolve(None, "hype") == MOODS["hype"]


def test_mood_keywords_are_case_insensitive():
    assert ToneResolver().resolve_mood(" Trivia ") == "trivia"


@pytest.mark.parametrize("explicit, inferred", [(None, None), ("sarcastic", None), ("grumpy", "unknown")])
def test_unrecognized_moods_fall_back_to_banter(explicit, inferred):
    assert ToneResolver().resolve(explicit, inferred) == MOODS["banter"]


def test_unrecognized_explicit_mood_still_allows_inferred():
    assert ToneResolver().resolve_mood("grumpy", "factual") == "factual"


def test_default_mood_must_exist():
    with pytest.raises(ValueError):
        ToneResolver(moods={"hype": "loud"}, default_mood="banter")


def test_prompt_with_match_context(summary):
    ctx = RequestContext(userMessage="Did Liverpool win yesterday?", sport="football")
    target = ResolvedTarget(focus_team="Liverpool")

    prompt = PromptBuilder().build(ctx, target, summary, MOODS["hype"])

    assert "witty insights about football" in prompt
    assert f"Tone: {MOODS['hype']}" in prompt
    assert 'User message: "Did Liverpool win yesterday?"' in prompt
    assert "Focus team: Liverpool" in prompt
    assert "Match: Liverpool vs Tottenham: 4 - 2 (2024-05-08)" in prompt
    assert MATCH_CONTEXT_INSTRUCTION in prompt
    assert GENERAL_COMMENTARY_INSTRUCTION not in prompt


def test_prompt_without_match_asks_for_general_commentary():
    ctx = RequestContext(userMessage="Give me a random sports fact", sport="tennis")

    prompt = PromptBuilder().build(ctx, ResolvedTarget(), None, MOODS["trivia"])

    assert GENERAL_COMMENTARY_INSTRUCTION in prompt
    assert "about tennis" in prompt
    assert "Focus team:" not in prompt
    assert "Match:" not in prompt


def test_prompt_is_deterministic(summary):
    ctx = RequestContext(userMessage="Chelsea?")
    target = ResolvedTarget(focus_team="Chelsea")
    builder = PromptBuilder()

    assert builder.build(ctx, target, summary, "x") == builder.build(ctx, target, summary, "x")


def test_match_summary_with_missing_scores():
    summary = MatchSummary.model_validate({"strEvent": "Chelsea vs Arsenal", "dateEvent": "2024-05-10"})

    assert summary.format_for_prompt() == "Chelsea vs Arsenal: ? - ? (2024-05-10)"
