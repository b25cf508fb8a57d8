# seed_cities.py
import argparse
import logging

from worldnav.catalog.city_store import SQLiteCityStore
from worldnav.catalog.core import CityCatalog
from worldnav.catalog.sample_data import sample_rows
from worldnav.config import GameConfig
from worldnav.exceptions import StorageError

def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    parser = argparse.ArgumentParser(description="Create and seed the World Navigation city database.")
    parser.add_argument("--data-dir", help="Directory holding the game database (default: ~/.worldnav)")
    args = parser.parse_args(argv)

    config = GameConfig(data_dir=args.data_dir) if args.data_dir else GameConfig()
    config.ensure_data_dir()

    logging.info(f"--- Seeding city database at {config.database_path} ---")
    try:
        store = SQLiteCityStore(config.database_path)
        inserted = store.insert_if_empty(sample_rows())
    except StorageError as e:
        logging.error(f"Seeding failed: {e}")
        return 1

    if inserted == 0:
        logging.info("Database already holds cities; nothing inserted.")

    catalog = CityCatalog(store)
    catalog.refresh()
    logging.info(f"[DONE] {len(catalog.cities)} cities available, {len(catalog.primary_cities())} primary.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
