from typing import List, Sequence

from product_recommender.models.product import ScoredProduct

def select_single_product(filtered_products: Sequence[ScoredProduct]) -> List[ScoredProduct]:
    """Best match only. On a tie the product listed last in the catalog wins."""
    if not filtered_products:
        return []
    max_score = max(sp.score for sp in filtered_products)
    top = [sp for sp in filtered_products if sp.score == max_score]
    return [top[-1]]

def select_multiple_products(filtered_products: Sequence[ScoredProduct]) -> List[ScoredProduct]:
    """All matches, highest score first. Equal scores keep catalog order."""
    # sorted() is stable, and stays stable with reverse=True
    return sorted(filtered_products, key=lambda sp: sp.score, reverse=True)
