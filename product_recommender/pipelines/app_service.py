from typing import Any, List, Mapping, Optional, Union

from product_recommender.models.product import FormSelection, Product, ScoredProduct
from product_recommender.data_access.loader import collect_options, load_products
from product_recommender.core.recommendation import get_recommendations

class AppService:
    """High-level service used by Streamlit app."""

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self.products: List[Product] = products if products is not None else load_products()
        self.preferences, self.features = collect_options(self.products)

    def list_preferences(self) -> List[str]:
        return list(self.preferences)

    def list_features(self) -> List[str]:
        return list(self.features)

    def get_recommendations(
        self,
        form_selection: Union[FormSelection, Mapping[str, Any], None],
    ) -> List[ScoredProduct]:
        return get_recommendations(form_selection, self.products)
