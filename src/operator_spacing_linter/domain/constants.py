"""Rule codes, message templates and shared defaults."""

SNIFF_PREFIX: str = "WhiteSpace.OperatorSpacing"

NO_SPACE_BEFORE: str = "NoSpaceBefore"
NO_SPACE_AFTER: str = "NoSpaceAfter"
SPACING_BEFORE: str = "SpacingBefore"
SPACING_AFTER: str = "SpacingAfter"

ALL_CODES: tuple[str, ...] = (NO_SPACE_BEFORE, NO_SPACE_AFTER, SPACING_BEFORE, SPACING_AFTER)

# %s placeholders: operator content, then found count where present.
MSG_NO_SPACE_BEFORE: str = 'Expected 1 space before "%s"; 0 found'
MSG_NO_SPACE_AFTER: str = 'Expected 1 space after "%s"; 0 found'
MSG_SPACING_BEFORE: str = 'Expected 1 space before "%s"; %s found'
MSG_SPACING_AFTER: str = 'Expected 1 space after "%s"; %s found'

DEFAULT_SEVERITY: int = 5
DEFAULT_MAX_FIX_PASSES: int = 50

CONFIG_SECTION: str = "operator-spacing"

BANNER: str = "operator-spacing :: one space around every operator"
