from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Generator, Self

from src.platform.logging.loguru_io_config import GeneratorMethod
from src.platform.logging.loguru_io_utils import reset_call_depth


if TYPE_CHECKING:
    from src.platform.logging.loguru_io import LoguruIO


class GeneratorWrapper:
    """Generator proxy that logs every value sent in and yielded out."""

    def __init__(self, gen_obj: Generator[Any, Any, Any], logger_io: 'LoguruIO') -> None:
        self.gen_obj = gen_obj
        self._logger_io = logger_io

    def __iter__(self) -> Self:
        return self

    def _step(self, method: GeneratorMethod, advance: Callable[[], Any], sent: Any) -> Any:
        try:
            self._logger_io.log_args_kwargs_content(sent, yield_method=method)
            out = advance()
            self._logger_io.log_return_content(out, yield_method=method)
            return out
        except StopIteration as e:
            self._logger_io.log_return_content(e.value, yield_method=method)
            raise
        finally:
            reset_call_depth()

    def __next__(self) -> Any:
        return self._step(GeneratorMethod.NEXT, lambda: next(self.gen_obj), None)

    def send(self, value: Any) -> Any:
        return self._step(GeneratorMethod.SEND, lambda: self.gen_obj.send(value), value)

    def throw(
        self,
        exc_type: type[BaseException],
        exc_val: BaseException | None = None,
        tb: TracebackType | None = None,
    ) -> Any:
        exc = exc_val if exc_val is not None else exc_type()
        if tb is not None:
            exc = exc.with_traceback(tb)
        return self._step(GeneratorMethod.THROW, lambda: self.gen_obj.throw(exc), exc_type)

    def close(self) -> None:
        self.gen_obj.close()
