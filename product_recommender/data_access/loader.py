import json
from typing import Any, List, Mapping, Optional, Tuple

from product_recommender.config.paths import PRODUCTS_PATH
from product_recommender.models.product import Product
from product_recommender.utils.exceptions import CatalogSchemaError, DataLoadError
from product_recommender.utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("id", "name")
LABEL_FIELDS = ("preferences", "features")

def _read_catalog(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Catalog not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Catalog {path} is not valid JSON (line {e.lineno})")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def _check_record(index: int, item: Any) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise CatalogSchemaError(index, f"expected an object, got {type(item).__name__}")
    missing = [f for f in REQUIRED_FIELDS if f not in item]
    if missing:
        raise CatalogSchemaError(index, "missing " + ", ".join(missing))
    if not isinstance(item["name"], str):
        raise CatalogSchemaError(index, "name must be a string")
    for f in LABEL_FIELDS:
        labels = item.get(f, [])
        if not isinstance(labels, list) or not all(isinstance(x, str) for x in labels):
            raise CatalogSchemaError(index, f"{f} must be a list of strings")
    return item

def load_products(path: Optional[str] = None) -> List[Product]:
    path = path or PRODUCTS_PATH
    raw = _read_catalog(path)
    if not isinstance(raw, list):
        logger.error(f"Expected a list of products in {path}")
        raise DataLoadError(f"Expected a list of products in {path}")
    try:
        products = [Product.from_dict(_check_record(i, item)) for i, item in enumerate(raw)]
    except CatalogSchemaError as e:
        logger.error(f"{path}: {e}")
        raise
    logger.info(f"Loaded {len(products)} products from {path}")
    return products

def collect_options(products: List[Product]) -> Tuple[List[str], List[str]]:
    """Unique preferences and features across the catalog, in first-seen order."""
    preferences = list(dict.fromkeys(pref for p in products for pref in p.preferences))
    features = list(dict.fromkeys(feat for p in products for feat in p.features))
    return preferences, features
