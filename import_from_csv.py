# import_from_csv.py
import argparse
import asyncio
import csv
import logging
import os
from urllib.parse import urljoin

import requests

from config import get_settings
from database import create_database
from models.model_state import bind_product
from repository.product_repository import SqliteProductRepository

"""
Usage examples:
1) Direct DB insert:
   python import_from_csv.py --file products.csv --mode db

2) POST to running API:
   python import_from_csv.py --file products.csv --mode api --api-key yourkey
"""

logger = logging.getLogger(__name__)

def parse_row(row):
    """Map a CSV row onto a product payload; header case is ignored."""
    row = {(k or "").strip().lower(): (v or "").strip() for k, v in row.items()}
    return {
        "name": row.get("name", ""),
        "price": row.get("price", "").replace("€", "").replace("$", "").replace(",", "") or 0,
        "stock": row.get("stock") or row.get("quantity") or 0,
        "color": row.get("color") or None,
    }

def read_products(csv_path):
    """Yield (line number, product) for every row that validates."""
    with open(csv_path, newline="", encoding="utf-8") as fh:
        for line_no, r in enumerate(csv.DictReader(fh), start=2):
            product, model_state = bind_product(parse_row(r))
            if not model_state.is_valid:
                logger.warning(f"Skipping line {line_no}: {model_state.errors}")
                continue
            yield line_no, product

async def insert_direct(csv_path, db_file=None):
    create_database(db_file)
    repository = SqliteProductRepository(db_file)
    count = 0
    for _, product in read_products(csv_path):
        await repository.create(product)
        count += 1
    logger.info(f"Inserted {count} rows into DB.")
    return count

def post_to_api(csv_path, base_url, api_key, session=None):
    endpoint = urljoin(base_url, "products/create")
    headers = {"api-key": api_key}
    http = session or requests.Session()
    count = 0
    for line_no, product in read_products(csv_path):
        payload = product.model_dump(exclude={"id"})
        resp = http.post(endpoint, json=payload, headers=headers, timeout=10, allow_redirects=False)
        if resp.status_code in (200, 201, 303):
            count += 1
        else:
            logger.error(f"Line {line_no} failed: {resp.status_code} {resp.text}")
    logger.info(f"Posted {count} products to API.")
    return count

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="CSV file with name, price, stock, color columns")
    parser.add_argument("--mode", choices=("db", "api"), default="db", help="db = write sqlite directly, api = POST to running API")
    parser.add_argument("--api-key", default=None, help="API key (for api mode)")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8000/"), help="API base url")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    if args.mode == "db":
        asyncio.run(insert_direct(args.file, settings.db_file))
    else:
        api_key = args.api_key or next(iter(settings.api_keys), None)
        if not api_key:
            logger.error("API key required for api mode. Provide --api-key or set API_KEYS in .env")
            return
        post_to_api(args.file, args.base_url, api_key)

if __name__ == "__main__":
    main()
