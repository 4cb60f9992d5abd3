class SlideFactoryError(Exception):
    pass


class InputNotFoundError(SlideFactoryError):
    pass


class DependencyMissingError(SlideFactoryError):
    pass


class CaptureError(SlideFactoryError):
    pass


class EncodingError(SlideFactoryError):
    pass
