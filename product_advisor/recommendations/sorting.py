from __future__ import annotations

from typing import Sequence

from .models import Recommendation, SortOption

_SORT_DESCRIPTIONS: dict[str, str] = {
    SortOption.match_score.value: "Sorted by best match to your needs",
    SortOption.price_low_to_high.value: "Sorted by price: lowest first",
    SortOption.price_high_to_low.value: "Sorted by price: highest first",
}


def _option_value(sort_option: SortOption | str) -> str:
    return sort_option.value if isinstance(sort_option, SortOption) else str(sort_option)


def sort_recommendations(
    recommendations: Sequence[Recommendation],
    sort_option: SortOption | str = SortOption.match_score,
) -> list[Recommendation]:
    """
    Return a new list ordered by *sort_option*; the input is left untouched.

    Ties keep their original relative order. An unrecognised option returns
    the recommendations in their original order.
    """
    option = _option_value(sort_option)

    if option == SortOption.match_score.value:
        return sorted(recommendations, key=lambda r: r.match_score, reverse=True)
    if option == SortOption.price_low_to_high.value:
        return sorted(recommendations, key=lambda r: r.product.price)
    if option == SortOption.price_high_to_low.value:
        return sorted(recommendations, key=lambda r: r.product.price, reverse=True)
    return list(recommendations)


def get_sort_description(sort_option: SortOption | str) -> str:
    return _SORT_DESCRIPTIONS.get(_option_value(sort_option), "Default sorting")
