"""
Static reaction templates for proposals.

Two templates exist: a simple yes/no vote and the default five-point consensus
scale. Reactions are attached in tuple order.
"""
from .types import ReactionTemplate, VoteRequest

WHITE_HEAVY_CHECK_MARK = "✅"
REGIONAL_INDICATOR_F = "\U0001F1EB"
REGIONAL_INDICATOR_N = "\U0001F1F3"
REGIONAL_INDICATOR_A = "\U0001F1E6"
NEGATIVE_SQUARED_CROSS_MARK = "❎"

SIMPLE_TEMPLATE = ReactionTemplate(
    name="simple",
    reactions=(WHITE_HEAVY_CHECK_MARK, NEGATIVE_SQUARED_CROSS_MARK),
    description=f"{WHITE_HEAVY_CHECK_MARK} - In Favor   {NEGATIVE_SQUARED_CROSS_MARK} - Against",
)

CONSENSUS_TEMPLATE = ReactionTemplate(
    name="consensus",
    reactions=(
        WHITE_HEAVY_CHECK_MARK,
        REGIONAL_INDICATOR_F,
        REGIONAL_INDICATOR_N,
        REGIONAL_INDICATOR_A,
        NEGATIVE_SQUARED_CROSS_MARK,
    ),
    description="\n".join(
        [
            f"{WHITE_HEAVY_CHECK_MARK} - Strongly In Favor",
            f"{REGIONAL_INDICATOR_F} - In Favor",
            f"{REGIONAL_INDICATOR_N} - Neutral",
            f"{REGIONAL_INDICATOR_A} - Against",
            f"{NEGATIVE_SQUARED_CROSS_MARK} - Strongly Against",
        ]
    ),
)


def select_template(request: VoteRequest) -> ReactionTemplate:
    """Pick the simple template when requested, otherwise the consensus scale."""
    return SIMPLE_TEMPLATE if request.simple else CONSENSUS_TEMPLATE
