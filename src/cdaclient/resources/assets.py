"""
Asset endpoints.
"""

from collections.abc import Mapping
from typing import Any

from ..async_result import AsyncResult, observe
from ..client_types import Completion, RequestHandle
from ..decoders import decode_asset, decode_assets
from ..types.array import Array
from ..types.asset import Asset
from ._base import ResourceAPI, naming_missing


class AssetsAPI(ResourceAPI):
    def fetch(self, identifier: str, *, then: Completion[Asset]) -> RequestHandle | None:
        """Fetch a single asset.

        Args:
            identifier: The asset ID.
            then: Called once with the Asset.
        """
        return self._client.fetch(
            f"assets/{identifier}", decode_asset, then=naming_missing(identifier, then)
        )

    def fetch_observable(self, identifier: str) -> tuple[RequestHandle | None, AsyncResult[Asset]]:
        return observe(lambda then: self.fetch(identifier, then=then))

    def fetch_all(
        self, *, matching: Mapping[str, Any] | None = None, then: Completion[Array[Asset]]
    ) -> RequestHandle | None:
        """Fetch the assets matching the given search parameters.

        Args:
            matching: Search parameters. Defaults to None.
            then: Called once with an Array of Asset objects.
        """
        return self._client.fetch("assets", decode_assets, parameters=matching, then=then)

    def fetch_all_observable(
        self, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[Array[Asset]]]:
        return observe(lambda then: self.fetch_all(matching=matching, then=then))

    def fetch_data(self, asset: Asset, *, then: Completion[bytes]) -> RequestHandle | None:
        """Fetch the file behind an asset as bytes."""
        return self._client.fetch_data(asset, then=then)

    def fetch_data_observable(self, asset: Asset) -> tuple[RequestHandle | None, AsyncResult[bytes]]:
        return self._client.fetch_data_observable(asset)
