"""Carrier account service."""

from ..core.request import Request
from ..schemas.carrier_account import CarrierAccount
from .base import RetrievableService


class CarrierAccountService(RetrievableService[CarrierAccount]):
    resource_model = CarrierAccount
    collection_path = "carrier_accounts"

    def list_all(self, *, api_key: str | None = None) -> list[CarrierAccount]:
        """
        List every carrier account on the API key's account.

        Args:
            api_key: Key for this call only.

        Returns:
            Carrier accounts in the order the API returns them.
        """
        accounts = self.execute(Request(self.collection_path), list[CarrierAccount], api_key)
        self.logger.debug("Fetched %d carrier accounts", len(accounts))
        return accounts
