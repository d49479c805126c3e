"""Label clients and sample labels that never touch the network."""

from src.label_client import BaseLabelClient, UpstreamRequestError

ADVIL_LABEL = {
    "openfda": {
        "brand_name": ["Advil"],
        "generic_name": ["IBUPROFEN"],
        "manufacturer_name": ["Pfizer Consumer Healthcare"],
    },
    "indications_and_usage": ["Temporarily relieves minor aches and pains."],
    "mechanism_of_action": ["Inhibits prostaglandin synthesis."],
    "adverse_reactions": ["Nausea, heartburn."],
    "dosage_and_administration": ["Take 1 tablet every 4 to 6 hours."],
    "warnings": ["Stomach bleeding warning."],
    "precautions": ["Use with caution in asthma."],
    "contraindications": ["Known hypersensitivity to ibuprofen."],
    "drug_interactions": ["Aspirin may reduce the effect."],
}

class StubLabelClient(BaseLabelClient):
    """
    Answers from a {search expression: results} table.
    Expressions not in the table fail like an upstream 404.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.queries = []
        self.closed = False

    def search(self, query, limit=1):
        self.queries.append(query)
        if query not in self.responses:
            raise UpstreamRequestError(f"404 for {query}")
        return self.responses[query]

    def close(self):
        self.closed = True

class EchoLabelClient(BaseLabelClient):
    """Returns a label whose brand name is whatever was searched."""

    def __init__(self):
        self.queries = []

    def search(self, query, limit=1):
        self.queries.append(query)
        name = query.split(":", 1)[1].strip('"')
        return [{"openfda": {"brand_name": [name.upper()]}}]

