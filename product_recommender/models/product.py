from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

class RecommendationType(str, Enum):
    SINGLE_PRODUCT = "SingleProduct"
    MULTIPLE_PRODUCTS = "MultipleProducts"

    @classmethod
    def parse(cls, value: Union[str, "RecommendationType", None]) -> "RecommendationType":
        """Return the matching type, or the default for missing/unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return DEFAULT_RECOMMENDATION_TYPE

# Used whenever the form does not say which kind of result it wants.
DEFAULT_RECOMMENDATION_TYPE = RecommendationType.MULTIPLE_PRODUCTS

def _as_tuple(items: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if items is None:
        return ()
    if isinstance(items, str):
        return (items,)
    return tuple(items)

@dataclass(frozen=True)
class Product:
    id: Any
    name: str
    category: str = ""
    preferences: Tuple[str, ...] = ()
    features: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", _as_tuple(self.preferences))
        object.__setattr__(self, "features", _as_tuple(self.features))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Product":
        return cls(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            preferences=_as_tuple(raw.get("preferences")),
            features=_as_tuple(raw.get("features")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "preferences": list(self.preferences),
            "features": list(self.features),
        }

@dataclass(frozen=True)
class FormSelection:
    selected_preferences: Tuple[str, ...] = ()
    selected_features: Tuple[str, ...] = ()
    selected_recommendation_type: RecommendationType = DEFAULT_RECOMMENDATION_TYPE

    # camelCase keys sent by the form widgets
    ALIASES = {
        "selectedPreferences": "selected_preferences",
        "selectedFeatures": "selected_features",
        "selectedRecommendationType": "selected_recommendation_type",
    }

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected_preferences", _as_tuple(self.selected_preferences))
        object.__setattr__(self, "selected_features", _as_tuple(self.selected_features))
        object.__setattr__(
            self,
            "selected_recommendation_type",
            RecommendationType.parse(self.selected_recommendation_type),
        )

    @classmethod
    def field_name(cls, key: str) -> str:
        return cls.ALIASES.get(key, key)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "FormSelection":
        values = {cls.field_name(k): v for k, v in raw.items()}
        return cls(
            selected_preferences=values.get("selected_preferences"),
            selected_features=values.get("selected_features"),
            selected_recommendation_type=values.get("selected_recommendation_type"),
        )

    def has_selections(self) -> bool:
        return bool(self.selected_preferences or self.selected_features)

@dataclass(frozen=True)
class ScoredProduct:
    product: Product
    score: int

    def to_dict(self) -> Dict[str, Any]:
        data = self.product.to_dict()
        data["score"] = self.score
        return data

@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = field(default=None)
