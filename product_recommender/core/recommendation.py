from typing import Any, List, Mapping, Optional, Sequence, Union

from product_recommender.core.scoring import (
    MIN_SCORE,
    filter_products_by_min_score,
    score_all_products,
)
from product_recommender.core.selection import select_multiple_products, select_single_product
from product_recommender.core.validation import validate_recommendation_request
from product_recommender.models.product import (
    FormSelection,
    Product,
    RecommendationType,
    ScoredProduct,
)
from product_recommender.utils.logger import get_logger

logger = get_logger(__name__)

def get_recommendations(
    form_selection: Union[FormSelection, Mapping[str, Any], None],
    products: Optional[Sequence[Product]],
) -> List[ScoredProduct]:
    """
    Rank `products` against the user's selections.

    Invalid requests (no catalog, no form, nothing selected) are logged and
    yield an empty list; they never raise. SingleProduct mode returns at most
    one product, anything else returns every match sorted by score.
    """
    if isinstance(form_selection, Mapping):
        form_selection = FormSelection.from_dict(form_selection)

    validation = validate_recommendation_request(form_selection, products)
    if not validation.is_valid:
        logger.warning(f"Recommendation validation failed: {validation.message}")
        return []

    scored = score_all_products(
        products,
        form_selection.selected_preferences,
        form_selection.selected_features,
    )
    filtered = filter_products_by_min_score(scored, MIN_SCORE)

    if form_selection.selected_recommendation_type is RecommendationType.SINGLE_PRODUCT:
        result = select_single_product(filtered)
    else:
        result = select_multiple_products(filtered)

    logger.debug(
        f"{len(filtered)} of {len(products)} products matched, returning {len(result)} "
        f"({form_selection.selected_recommendation_type.value})"
    )
    return result
