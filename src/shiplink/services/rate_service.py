from ..schemas.rate import Rate
from .base import RetrievableService


class RateService(RetrievableService[Rate]):
    resource_model = Rate
    collection_path = "rates"
