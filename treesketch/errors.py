class TreeSketchError(Exception):
    pass


class ConfigurationError(TreeSketchError):
    pass


class LayoutOverflowError(TreeSketchError):
    pass


class LayoutInvariantError(TreeSketchError):
    pass
