# Diary list filters: sentiment and date substring, AND-combined, order kept.


def _matches(entry: dict, sentiment: str | None, date_query: str) -> bool:
    if sentiment and entry.get("sentiment") != sentiment:
        return False
    # Loose on purpose: "1/2" also matches 11/2/2024 and 1/23/2024.
    if date_query and date_query not in (entry.get("date") or ""):
        return False
    return True


def apply(entries: list, sentiment: str | None = None, date_substring: str | None = None) -> list:
    date_query = (date_substring or "").strip()
    return [e for e in entries if _matches(e, sentiment, date_query)]
