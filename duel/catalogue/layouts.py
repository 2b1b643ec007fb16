"""
Stage Layouts - Pyramid templates for each age.

One string per row, top row first. Cell kinds:
- U: card dealt face up
- D: card dealt face down
- P: placeholder, no card

All rows of an age have the same width. Odd rows sit half a card to the
left of even rows, so the cell at (row, col) is covered by
(row + 1, col) and (row + 1, col + 1) on even rows, or by
(row + 1, col) and (row + 1, col - 1) on odd rows.
"""

from ..engine_core.state import Age

FACE_UP = "U"
FACE_DOWN = "D"
PLACEHOLDER = "P"

AGE_1_STAGE = (
    "PPUUPP",
    "PPDDDP",
    "PUUUUP",
    "PDDDDD",
    "UUUUUU",
)

AGE_2_STAGE = (
    "UUUUUU",
    "PDDDDD",
    "PUUUUP",
    "PPDDDP",
    "PPUUPP",
)

AGE_3_STAGE = (
    "PUUPP",
    "PDDDP",
    "UUUUP",
    "PDPDP",
    "UUUUP",
    "PDDDP",
    "PUUPP",
)

STAGE_LAYOUTS: dict[Age, tuple[str, ...]] = {
    Age.AGE_1: AGE_1_STAGE,
    Age.AGE_2: AGE_2_STAGE,
    Age.AGE_3: AGE_3_STAGE,
}


def stage_capacity(age: Age) -> int:
    """Number of cards a pyramid needs."""
    return sum(
        1 for row in STAGE_LAYOUTS[age] for cell in row if cell != PLACEHOLDER
    )
