from __future__ import annotations
import logging
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import SequenceQuery

logger = logging.getLogger(__name__)


class _JoinOperations(Generic[T]):
    def _build_lookup(self: 'SequenceQuery[T]', inner: Iterable[U],
                      inner_key_selector: KeySelector[U, K]) -> Dict[K, List[U]]:
        """index the inner sequence by key, keeping encounter order within each key"""
        inner_lookup = defaultdict(list)
        for inner_item in self._normalize(inner):
            inner_lookup[inner_key_selector(inner_item)].append(inner_item)
        logger.debug("built join lookup with %d keys", len(inner_lookup))
        return inner_lookup

    def join(self: 'SequenceQuery[T]', inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'SequenceQuery[V]':
        """inner join: outer elements without a match produce nothing, several matches fan out"""
        inner_lookup = self._build_lookup(inner, inner_key_selector)
        result = []
        for outer_item in self._get_data():
            outer_key = outer_key_selector(outer_item)
            # .get keeps the defaultdict from growing on misses
            for inner_item in inner_lookup.get(outer_key, ()):
                result.append(result_selector(outer_item, inner_item))
        return self._set_data(result)

    def left_join(self: 'SequenceQuery[T]', inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                  inner_key_selector: KeySelector[U, K],
                  result_selector: Callable[[T, Optional[U]], V],
                  default_inner: Optional[U] = None) -> 'SequenceQuery[V]':
        """left outer join - unmatched outer elements pair with default_inner"""
        inner_lookup = self._build_lookup(inner, inner_key_selector)
        result = []
        for outer_item in self._get_data():
            matched_inners = inner_lookup.get(outer_key_selector(outer_item))
            if matched_inners:
                for inner_item in matched_inners:
                    result.append(result_selector(outer_item, inner_item))
            else:
                result.append(result_selector(outer_item, default_inner))
        return self._set_data(result)

    def group_join(self: 'SequenceQuery[T]', inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, List[U]], V]) -> 'SequenceQuery[V]':
        """one result per outer element, paired with the list of its matches"""
        inner_lookup = self._build_lookup(inner, inner_key_selector)
        return self._set_data([result_selector(o, list(inner_lookup.get(outer_key_selector(o), [])))
                               for o in self._get_data()])
