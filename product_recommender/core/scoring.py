from typing import FrozenSet, Iterable, List, Sequence

from product_recommender.models.product import Product, ScoredProduct

MIN_SCORE = 1

def build_selected_items(
    selected_preferences: Iterable[str],
    selected_features: Iterable[str],
) -> FrozenSet[str]:
    """Union of every selected label, deduplicated for O(1) lookups."""
    return frozenset(selected_preferences) | frozenset(selected_features)

def calculate_product_score(product: Product, selected_items: FrozenSet[str]) -> int:
    # Product side is not deduplicated: every listed label counts.
    product_items = product.preferences + product.features
    return sum(1 for item in product_items if item in selected_items)

def score_all_products(
    products: Sequence[Product],
    selected_preferences: Iterable[str],
    selected_features: Iterable[str],
) -> List[ScoredProduct]:
    selected_items = build_selected_items(selected_preferences, selected_features)
    return [
        ScoredProduct(product=p, score=calculate_product_score(p, selected_items))
        for p in products
    ]

def filter_products_by_min_score(
    scored_products: Sequence[ScoredProduct],
    min_score: int = MIN_SCORE,
) -> List[ScoredProduct]:
    return [sp for sp in scored_products if sp.score >= min_score]
