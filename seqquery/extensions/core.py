from __future__ import annotations
import typing
from itertools import takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery


class _CoreOperations(Generic[T]):
    def where(self: 'SequenceQuery[T]', predicate: Predicate[T]) -> 'SequenceQuery[T]':
        """keep elements matching a predicate"""
        return self._set_data([x for x in self._get_data() if predicate(x)])

    def select(self: 'SequenceQuery[T]', selector: Selector[T, U]) -> 'SequenceQuery[U]':
        """project each element to a new form"""
        return self._set_data([selector(x) for x in self._get_data()])

    def select_many(self: 'SequenceQuery[T]', selector: Selector[T, Iterable[U]]) -> 'SequenceQuery[U]':
        """project each element to an iterable and flatten one level"""
        return self._set_data([item for x in self._get_data() for item in selector(x)])

    def take(self: 'SequenceQuery[T]', count: int) -> 'SequenceQuery[T]':
        """keep at most the first 'count' elements"""
        # clamp, a negative slice bound would count from the end
        return self._set_data(self._get_data()[:max(count, 0)])

    def skip(self: 'SequenceQuery[T]', count: int) -> 'SequenceQuery[T]':
        """drop the first 'count' elements"""
        return self._set_data(self._get_data()[max(count, 0):])

    def take_while(self: 'SequenceQuery[T]', predicate: Predicate[T]) -> 'SequenceQuery[T]':
        """keep elements up to the first one failing the predicate"""
        return self._set_data(list(takewhile(predicate, self._get_data())))

    def skip_while(self: 'SequenceQuery[T]', predicate: Predicate[T]) -> 'SequenceQuery[T]':
        """drop elements up to the first one failing the predicate"""
        return self._set_data(list(dropwhile(predicate, self._get_data())))

    def order_by(self: 'SequenceQuery[T]', key_selector: KeySelector[T, Any],
                 descending: bool = False) -> 'SequenceQuery[T]':
        """
        stable sort by a key.
        python's sort keeps equal keys in their original order for reverse=True as well,
        so descending only flips the comparison, never the order of ties.
        """
        return self._set_data(sorted(self._get_data(), key=key_selector, reverse=descending))

    def order_by_descending(self: 'SequenceQuery[T]', key_selector: KeySelector[T, Any]) -> 'SequenceQuery[T]':
        """stable sort by a key, largest first"""
        return self.order_by(key_selector, descending=True)

    def reverse(self: 'SequenceQuery[T]') -> 'SequenceQuery[T]':
        """invert the order of the elements"""
        return self._set_data(self._get_data()[::-1])

    # names used by the javascript-style api
    filter = where
    map = select
