"""Plain-text and JSON rendering of an account export."""

import json

from .exceptions import InvalidBackupError

JSON_BEGIN = '----- BEGIN JSON DATA -----'
JSON_END = '----- END JSON DATA -----'

FORMAT_VERSION = 1

SECTION_TITLES = {
    'aviaries': 'AVIARIES',
    'birds': 'BIRDS',
    'health_records': 'HEALTH RECORDS',
    'couples': 'COUPLES',
    'nests': 'NESTS',
    'eggs': 'EGGS',
}

STATISTIC_LABELS = {
    'total_birds': 'Total birds',
    'active_birds': 'Active birds',
    'total_couples': 'Total couples',
    'active_couples': 'Active couples',
    'total_nests': 'Total nests',
    'active_nests': 'Active nests',
    'total_eggs': 'Total eggs',
    'hatched_eggs': 'Hatched eggs',
    'total_aviaries': 'Total aviaries',
}


def render_json(document):
    return json.dumps(document, ensure_ascii=False, indent=2)


def _value(value):
    if value is None or value == '':
        return '-'
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    return str(value)


def render_text(document):
    """
    Human-readable report followed by the JSON document between
    JSON_BEGIN/JSON_END markers, so a saved report can be imported again.

    Every field of every record is rendered.
    """
    account = document['account']
    lines = [
        'AVIARY KEEPER EXPORT',
        f"Account: {account['email']}" + (f" ({account['name']})" if account.get('name') else ''),
        f"Exported at: {document['exported_at']}",
        '',
        'STATISTICS',
    ]

    for key, label in STATISTIC_LABELS.items():
        lines.append(f"  {label}: {document['statistics'].get(key, 0)}")

    for collection, title in SECTION_TITLES.items():
        records = document.get(collection, [])
        lines.append('')
        lines.append(f"{title} ({len(records)})")
        if not records:
            lines.append('  none')
        for record in records:
            lines.append(f"  * {record['id']}")
            for field, value in record.items():
                if field != 'id':
                    lines.append(f"      {field}: {_value(value)}")

    lines.extend(['', JSON_BEGIN, render_json(document), JSON_END, ''])
    return '\n'.join(lines)


def _last_marker_line(lines, marker):
    """
    Index of the last line that is exactly the marker.

    Record fields may contain the marker text, but inside the JSON block it
    is always part of a quoted string and never a line of its own.
    """
    for index in range(len(lines) - 1, -1, -1):
        if lines[index].strip() == marker:
            return index
    return None


def parse_export(payload):
    """
    Turn an import payload into an export document.

    Accepts the document itself (dict), its JSON text, or a full text
    report containing the JSON block.

    Raises:
        InvalidBackupError: If no JSON document can be found
    """
    if isinstance(payload, dict):
        return payload

    if not isinstance(payload, str) or not payload.strip():
        raise InvalidBackupError("Import data is empty")

    text = payload
    lines = payload.splitlines()
    begin = _last_marker_line(lines, JSON_BEGIN)
    if begin is not None:
        end = _last_marker_line(lines, JSON_END)
        if end is None or end < begin:
            raise InvalidBackupError("JSON block of the export is not terminated")
        text = '\n'.join(lines[begin + 1:end])

    try:
        document = json.loads(text)
    except ValueError:
        raise InvalidBackupError("Import data is not valid JSON")

    if not isinstance(document, dict):
        raise InvalidBackupError("Import data must be a JSON object")
    return document
