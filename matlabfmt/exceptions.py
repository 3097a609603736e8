

__all__ = ['FormatterError', 'ConfigurationError']


class FormatterError(RuntimeError):
    """Generic error of the matlabfmt functions."""

    def __init__(self, msg=None):
        super().__init__(msg)


class ConfigurationError(FormatterError, ValueError):
    """Error raised when the formatter is built with invalid options.

    Only options that have no sensible fallback raise this error (e.g. a non
    positive indentation width); unknown values of enumerated options are
    replaced by their default instead.
    """

    def __init__(self, msg=None, option=None):
        super().__init__(msg)
        self._option = option

    @property
    def option(self):
        """str: the name of the offending option, if known."""
        return self._option
