import sys

with_tb_sys_except_hook = sys.excepthook
sans_tb_sys_except_hook = lambda tp,ex,tb: print(str(ex)) if isinstance(ex, ArffExit) else with_tb_sys_except_hook(tp,ex,tb)

sys.excepthook = sans_tb_sys_except_hook

class ArffException(Exception):
    """The base class for every error raised while reading or changing ARFF data."""

    def __init__(self, message: str, line: str = None, line_number: int = None) -> None:
        super().__init__(message)
        self.message     = message
        self.line        = line
        self.line_number = line_number

    def located(self, line_number: int, line: str) -> 'ArffException':
        """Attach the position of the offending line and return self."""
        self.line_number = line_number
        self.line        = line
        return self

    def __str__(self) -> str:
        if self.line_number is None and self.line is None:
            return self.message

        where = f"line {self.line_number}" if self.line_number is not None else "line"
        return f"{self.message.rstrip('.')} ({where}: {self.line!r})."

    def _render_traceback_(self):
        # This is a special method used by Jupyter Notebook for writing tracebacks
        # By dummying it up we can prevent ArffException from writing tracebacks in Jupyter Notebook
        # https://ipython.readthedocs.io/en/stable/config/integrating.html
        return [str(self)]

class MalformedAttribute(ArffException):
    """An @attribute line without a recognizable name/datatype boundary."""

class UnsupportedDatatype(ArffException):
    """An @attribute datatype that is neither a known keyword nor a nominal list."""

    def __init__(self, text: str, line: str = None, line_number: int = None) -> None:
        super().__init__(f"The datatype '{text}' is not supported.", line, line_number)
        self.text = text

class RowSchemaMismatch(ArffException):
    """A data row that does not line up with the declared attributes."""

class AttributeNotFound(ArffException):
    """No attribute has the requested name."""

class ArffExit(BaseException):
    # By inheriting directly from BaseException we are able to avoid triggering common
    # exception handlers. This is how the SystemExit exception also works when calling `exit()`.

    def _render_traceback_(self):
        return [str(self)]
