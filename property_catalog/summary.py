"""Short human-readable text describing the visible listings."""


def results_summary(shown: int, total: int, search_term: str = "", category: str = "") -> str:
    parts = [f"Showing {shown} of {total} properties"]
    if search_term:
        parts.append(f'matching "{search_term}"')
    if category:
        parts.append(f"filtered by {category}")
    return " ".join(parts)


def empty_state_message(search_term: str = "", category: str = "") -> str:
    if search_term or category:
        return "Try adjusting your search criteria"
    return "No properties available at the moment"


def backend_hint(base_url: str) -> str:
    return f"Make sure the properties API is reachable at {base_url}"
