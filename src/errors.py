class GDAError(Exception):
    """Base class for errors raised while fitting or evaluating the model"""


class EmptyDatasetError(GDAError, ValueError):
    def __init__(self):
        super().__init__("Cannot estimate parameters from an empty dataset")


class EmptyClassError(GDAError, ValueError):
    def __init__(self, label):
        self.label = label
        super().__init__(f"No observations for class {label}")


class InvalidClassLabelError(GDAError, ValueError):
    def __init__(self, index, label):
        self.index = index
        self.label = label
        super().__init__(
            f"Observation {index} has class {label!r}, expected 0 or 1"
        )


class DegenerateMatrixError(GDAError, ArithmeticError):
    def __init__(self, determinant):
        self.determinant = determinant
        super().__init__(
            f"Matrix is singular or near-singular (determinant = {determinant})"
        )


class InvalidArgument(GDAError, ValueError):
    pass


class NotFittedError(GDAError, RuntimeError):
    pass
