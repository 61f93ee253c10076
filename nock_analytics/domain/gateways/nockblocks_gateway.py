"""
Domain Gateway - NockBlocks

Interface for the NockBlocks JSON-RPC API. Results are returned as the
loosely typed JSON the API produces; validation happens in the domain
services.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class INockBlocksGateway(ABC):
    """Interface for the NockBlocks JSON-RPC gateway."""

    @abstractmethod
    async def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Perform a single JSON-RPC call and return its ``result`` member.

        Raises:
            NockBlocksRPCError: On transport, HTTP or RPC-level failures
        """
        pass

    @abstractmethod
    async def get_tip(self) -> Dict[str, Any]:
        """Return the current chain tip (``height``, ``timestamp``, ...)."""
        pass

    @abstractmethod
    async def get_proof_rate_history(
        self,
        start_height: int,
        end_height: int,
        max_samples: int,
        smoothing_type: str,
    ) -> Dict[str, Any]:
        """
        Return the proof-rate history between two heights.

        Args:
            start_height: First block height
            end_height: Last block height (usually the tip)
            max_samples: Upper bound on returned samples
            smoothing_type: Server-side smoothing (e.g. "smoothed_100")
        """
        pass

    @abstractmethod
    async def get_wallet_growth_metrics(
        self, window_size: int, data_points: int
    ) -> Dict[str, Any]:
        """Return wallet growth windows of ``window_size`` blocks each."""
        pass
