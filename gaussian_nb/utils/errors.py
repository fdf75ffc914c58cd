# gaussian_nb/utils/errors.py
class NaiveBayesError(ValueError):
    """
    Base class for every contract violation raised by gaussian_nb.
    """


class DimensionMismatch(NaiveBayesError):
    """
    Point / data width differs from the model dimensionality,
    or labels do not line up with the data rows.
    No truncation or padding is ever attempted.
    """


class LabelOutOfRange(NaiveBayesError):
    """
    Training label outside [0, n_classes) or not integral.
    """


class InvalidState(NaiveBayesError):
    """
    Model bookkeeping cannot support the requested operation
    (inconsistent / overflowing counts, classify with no classes).
    """


class InvalidParameters(NaiveBayesError):
    """
    Raised by load_parameters when a parameter set breaks a model invariant.
    """
