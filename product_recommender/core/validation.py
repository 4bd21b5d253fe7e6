from typing import Optional, Sequence

from product_recommender.models.product import FormSelection, Product, ValidationResult

def validate_recommendation_request(
    form_selection: Optional[FormSelection],
    products: Optional[Sequence[Product]],
) -> ValidationResult:
    if not products:
        return ValidationResult(False, "No products available")
    if form_selection is None:
        return ValidationResult(False, "Form data is required")
    if not form_selection.has_selections():
        return ValidationResult(False, "At least one preference or feature must be selected")
    return ValidationResult(True)
