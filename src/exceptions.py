class InvalidFilterParameterError(Exception):
    """Raised when a filter is constructed with an amount outside its domain."""

    def __init__(self, filter_name: str, amount: float, domain: str) -> None:
        self.filter_name = filter_name
        self.amount = amount
        self.domain = domain
        super().__init__(
            f"{filter_name} amount must be in {domain}, got {amount!r}"
        )


class PresetNotFoundError(Exception):
    """Raised when a preset name is not present in the preset table."""

    def __init__(self, preset_name: str) -> None:
        self.preset_name = preset_name
        super().__init__(f"Preset '{preset_name}' does not exist.")


class PresetAlreadyRegisteredError(Exception):
    """Raised when attempting to register a preset with a name that already exists."""

    def __init__(self, preset_name: str) -> None:
        self.preset_name = preset_name
        super().__init__(
            f"Preset '{preset_name}' is already registered. "
            f"Use a different name for the new preset."
        )


class RasterShapeError(ValueError):
    """Raised when pixel data does not match the raster dimensions."""

    def __init__(self, message: str):
        super().__init__(message)
