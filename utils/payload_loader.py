# utils/payload_loader.py - CSV loader that yields API method + parsed request data
import csv
import json

PAYLOAD_COLUMNS = ("payload", "Payload", "Sample_Request")


def load_payload_from_csv(csv_path, delimiter=","):
    rows = []
    with open(csv_path, newline='', encoding='utf-8') as fh:
        reader = csv.DictReader(fh, delimiter=delimiter)
        for r in reader:
            sample = next((r[c] for c in PAYLOAD_COLUMNS if r.get(c)), None)
            parsed = None
            if sample:
                try:
                    parsed = json.loads(sample)
                except ValueError:
                    parsed = None
            rows.append({
                'TestCaseID': r.get('id') or r.get('ID') or r.get('TestCaseID') or '',
                'api_method': (r.get('api_method') or r.get('method') or '').strip(),
                'row': r,
                'parsed_request': parsed if isinstance(parsed, dict) else None,
            })
    return rows
