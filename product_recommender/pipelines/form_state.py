from dataclasses import fields, replace
from typing import Any, Optional

from product_recommender.models.product import FormSelection

_FIELD_NAMES = {f.name for f in fields(FormSelection)}

class FormState:
    """Current form selection, with reset back to where it started."""

    def __init__(self, initial: Optional[FormSelection] = None) -> None:
        self.initial = initial or FormSelection()
        self.form_selection = self.initial

    def handle_change(self, field: str, value: Any) -> FormSelection:
        name = FormSelection.field_name(field)
        if name not in _FIELD_NAMES:
            raise KeyError(f"Unknown form field: {field}")
        self.form_selection = replace(self.form_selection, **{name: value})
        return self.form_selection

    def reset(self) -> FormSelection:
        self.form_selection = self.initial
        return self.form_selection

    def has_selections(self) -> bool:
        return self.form_selection.has_selections()
