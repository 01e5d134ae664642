"""Base class for transforms."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from matsubara import numpy as np
from matsubara import printing

if TYPE_CHECKING:
    from typing import Any

    from matsubara._backend import Plan
    from matsubara.typing import Array


class BaseTransform(ABC):
    """Base class for transforms.

    A transform is constructed once with fixed parameters, and is called as ``transform(inp, out)``
    any number of times thereafter. The result is accumulated into ``out``, which must be
    initialised by the caller.
    """

    _options: tuple[str, ...] = ()

    in_dtype: type = np.complex128
    out_dtype: type = np.complex128

    def __init_subclass__(cls, *args: Any, **kwargs: Any) -> None:
        """Initialise a subclass of :class:`BaseTransform`."""
        super().__init_subclass__(*args, **kwargs)

        def wrap_init(init: Any) -> Any:
            """Wrapper to call __log_init__ after __init__."""

            @functools.wraps(init)
            def wrapped_init(self: BaseTransform, *args: Any, **kwargs: Any) -> None:
                init(self, *args, **kwargs)
                if type(self).__init__ is wrapped_init:
                    self.__log_init__()

            return wrapped_init

        if "__init__" in cls.__dict__:
            cls.__init__ = wrap_init(cls.__init__)  # type: ignore[method-assign]

    def __log_init__(self) -> None:
        """Hook called after :meth:`__init__` for logging purposes."""
        options: list[tuple[str, Any]] = []
        for key in self._options:
            if not hasattr(self, key):
                raise ValueError(f"Option {key} not set in {self.__class__.__name__}")
            options.append((key, getattr(self, key)))
        options.append(("path", self.plan.backend if self.use_fft() else "naive"))
        printing.print_options(self.__class__.__name__, options)

    @abstractmethod
    def __call__(self, inp: Array, out: Array) -> None:
        """Apply the transform, accumulating into the output.

        Args:
            inp: Input array, with size :meth:`in_size`.
            out: Output array, with size :meth:`out_size`.
        """
        pass

    @abstractmethod
    def naive(self, inp: Array, out: Array) -> None:
        """Apply the transform by direct summation, accumulating into the output.

        Args:
            inp: Input array, with size :meth:`in_size`.
            out: Output array, with size :meth:`out_size`.
        """
        pass

    @abstractmethod
    def in_size(self) -> int:
        """Get the size of the input."""
        pass

    @abstractmethod
    def out_size(self) -> int:
        """Get the size of the output."""
        pass

    @property
    @abstractmethod
    def plan(self) -> Plan:
        """Get the plan of the accelerated transform."""
        pass

    def use_fft(self) -> bool:
        """Check if the accelerated transform is used."""
        return self.plan.is_initialized()
