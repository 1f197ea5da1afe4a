"""Batch service."""

from ..schemas.batch import Batch, BatchCreate
from .base import ResourceService


class BatchService(ResourceService[Batch, BatchCreate]):
    resource_model = Batch
    options_model = BatchCreate
    collection_path = "batches"
    root_key = "batch"
