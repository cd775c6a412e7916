"""
A common interface for text-parseable classes.
"""
import abc
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

T = TypeVar('T')

WHITESPACE: FrozenSet[str] = frozenset(" \t\r\n")
"""
The characters skipped between tokens.
"""


class ParseError(Exception):
    """
    Raised when a string fails to parse to an instance of `Parseable`.

    The unparsed text is held as a position into the original input and
    is only sliced out on demand.
    """

    def __init__(self, tp: type, input: str, pos: int = 0) -> None:
        super().__init__()
        self.tp = tp
        self.input = input
        self.pos = pos

    @property
    def parsed(self) -> str:
        """
        The input from the position at which parsing failed.
        """
        return self.input[self.pos :]

    def __reduce__(self) -> Union[str, Tuple[type, str]]:  # noqa: D105
        return ParseError, (self.tp, self.parsed)

    def __str__(self) -> str:  # noqa: D105
        name = getattr(self.tp, "__name__", str(self.tp))
        parsed = self.input[self.pos : self.pos + 73]
        if len(parsed) > 72:
            parsed = parsed[: 72] + "..."
        return f"Failed to parse {name} from {parsed!r}"


class Parseable(abc.ABC):
    """
    Something that can be parsed from text.

    The chief method that must be implemented by any subclass is
    `_chain_parse`. In essence, this form of parsing is intended to
    perform a single scan across the input with minimal backtracks or
    buffering.
    A failed `_chain_parse` raises `ParseError` and, since positions are
    passed by value, leaves the caller's position untouched.
    """

    @classmethod
    @abc.abstractmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple[Any, int]:
        """
        Parse an instance of `cls` starting from the given position.

        Parameters
        ----------
        input : str
            A string beginning at `pos` with a representation of a `cls`
            instance.
        pos : int
            The position at which to start parsing.

        Returns
        -------
        Any
            The parsed `cls` instance.
        int
            The index of the first character after the text representing
            the parsed `cls` instance.

        Raises
        ------
        ParseError
            If an instance of `cls` cannot be parsed from the input
            starting at `pos`.
        """
        ...

    @classmethod
    def _alt(
            cls,
            input: str,
            pos: int,
            *alternatives: Union[Type['Parseable'],
                                 Callable[[str,
                                           int],
                                          Tuple[Any,
                                                int]]]) -> Tuple[Any,
                                                                 int]:
        """
        Return the result of the first alternative that parses.

        Each alternative is either a `Parseable` subclass or a function
        with the same signature as `_chain_parse`.
        Alternatives are tried in the given order from the same
        position.

        Raises
        ------
        ParseError
            If no alternative matches, chained from the failure of the
            last alternative.
        """
        error: Optional[ParseError] = None
        for alternative in alternatives:
            if isinstance(alternative, type):
                alternative = alternative._chain_parse
            try:
                return alternative(input, pos)
            except ParseError as e:
                error = e
        raise ParseError(cls, input, pos) from error

    @classmethod
    def _expect(cls, input: str, pos: int, expected: str, begpos: int) -> int:
        """
        Parse the expected input and raise an error if not found.
        """
        for ec in expected:
            if pos >= len(input) or input[pos] != ec:
                raise ParseError(cls, input, begpos)
            pos += 1
        return pos

    @classmethod
    def _lstrip(cls, input: str, pos: int) -> int:
        """
        Advance `pos` to the next non-whitespace character in `input`.
        """
        while pos < len(input) and input[pos] in WHITESPACE:
            pos += 1
        return pos

    @classmethod
    def _many(
        cls,
        input: str,
        pos: int,
        parser: Callable[[str,
                          int],
                         Tuple[T,
                               int]],
    ) -> Tuple[List[T],
               int,
               Optional[ParseError]]:
        """
        Apply `parser` repeatedly until it fails.

        Returns
        -------
        List[T]
            The parsed values in order, possibly empty.
        int
            The position after the last successful parse.
        Optional[ParseError]
            The failure that stopped the repetition, if any.
        """
        results = []
        error = None
        while True:
            try:
                result, new_pos = parser(input, pos)
            except ParseError as e:
                error = e
                break
            if new_pos == pos:
                # an empty match would repeat forever
                break
            results.append(result)
            pos = new_pos
        return results, pos, error

    @classmethod
    def parse(
        cls,
        input: str,
        exhaustive: bool = True,
        lstrip: bool = True,
        pos: int = 0,
        **kwargs: Dict[str,
                       Any]) -> Union[Any,
                                      Tuple[Any,
                                            int]]:
        """
        Parse an instance of `cls`.

        Parameters
        ----------
        input : str
            A string representation of a `cls` instance.
        exhaustive : bool, optional
            Whether to require parsing to the end of the entire `input`,
            by default True.
            If False, the position reached is returned.
        lstrip : bool, optional
            Whether to strip leading whitespace before parsing, by
            default True.
        pos : int, optional
            The character index at which to start parsing, by default
            zero.
        kwargs : Dict[str, Any], optional
            Optional keyword arguments to customize parsing.

        Returns
        -------
        Any
            An instance of `cls` corresponding to the `input`.
        int, optional
            The position reached at the end of parsing if `exhaustive`
            is False.

        Raises
        ------
        ParseError
            If the `input` cannot be parsed into an instance of `cls` or
            `exhaustive` is True and there is extra trailing input after
            any valid string representation of `cls`.
        """
        if lstrip:
            pos = cls._lstrip(input, pos)
        parsed, pos = cls._chain_parse(input, pos, **kwargs)
        if exhaustive:
            if pos < len(input):
                raise ParseError(cls, input, pos)
            return parsed
        else:
            return parsed, pos
