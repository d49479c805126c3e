import os
import yaml
import logging
import pandas as pd
from tqdm import tqdm

from src.errors import InvalidInput, MedicineLookupError, NotFound
from src.label_client import create_label_client
from src.lookup import search_medicine

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logging.getLogger('urllib3').setLevel(logging.WARNING)

DEFAULT_INPUT_FILE = 'data/medicine_names.txt'
DEFAULT_OUTPUT_FILE = 'data/processed/medicine_lookup_results.csv'


def read_medicine_names(path):
    """One name per line; blank lines and # comments are skipped."""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip() and not line.lstrip().startswith('#')]


def lookup_batch(names, client):
    rows = []
    for name in tqdm(names, desc="Looking up medicines"):
        row = {'query': name}
        try:
            row.update(search_medicine(name, client))
            row['status'] = 'found'
        except NotFound as e:
            row['status'] = 'not_found'
            row['error'] = e.message
        except InvalidInput as e:
            row['status'] = 'invalid'
            row['error'] = e.message
        except MedicineLookupError as e:
            row['status'] = 'error'
            row['error'] = e.message
        rows.append(row)
    return rows


def main():
    logging.info("--- Starting Open Clinic batch lookup ---")

    try:
        with open('params.yaml', 'r') as f:
            params = yaml.safe_load(f) or {}
        logging.info("Parameters from params.yaml loaded.")
    except FileNotFoundError:
        logging.warning("params.yaml not found, using defaults.")
        params = {}

    batch_config = params.get('batch_lookup', {})
    input_file = batch_config.get('input_file', DEFAULT_INPUT_FILE)
    output_file = batch_config.get('output_file', DEFAULT_OUTPUT_FILE)

    try:
        names = read_medicine_names(input_file)
    except FileNotFoundError:
        logging.error(f"Input file {input_file} not found! Please create it.")
        return

    logging.info(f"Found {len(names)} medicine names to look up.")
    client = create_label_client(params.get('openfda', {}))
    try:
        rows = lookup_batch(names, client)
    finally:
        client.close()

    if rows:
        os.makedirs(os.path.dirname(output_file) or '.', exist_ok=True)
        df = pd.DataFrame(rows)
        df.to_csv(output_file, index=False)
        found = int((df['status'] == 'found').sum())
        logging.info("--- Batch Lookup Finished ---")
        logging.info(f"{found}/{len(rows)} medicines found. Results saved to {output_file}")
    else:
        logging.warning("No medicine names to look up.")


if __name__ == '__main__':
    main()
