"""Error types raised while composing seeds and deriving addresses."""


class PdaError(ValueError):
    """Base class for program-derived address failures."""


class SeedOverflowError(PdaError):
    """A seed set exceeds the element-count or per-seed length limit."""


class BumpExhaustedError(PdaError):
    """No bump in 255..0 produced an off-curve address."""


class MalformedInputError(PdaError):
    """An identifier does not have the expected width or encoding."""
