import os

# product_recommender/config/paths.py

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))      # .../product_recommender/config
PACKAGE_DIR = os.path.dirname(CONFIG_DIR)                    # .../product_recommender
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)                  # repo root

DATA_DIR = os.path.join(PROJECT_ROOT, "data")

PRODUCTS_PATH = os.environ.get(
    "RECOMMENDER_PRODUCTS_PATH", os.path.join(DATA_DIR, "products.json")
)
