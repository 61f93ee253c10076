"""
Infrastructure Gateway - NockBlocks Implementation

JSON-RPC 2.0 client for the public NockBlocks API.
"""

import time
from typing import Any, Dict, List, Optional

import httpx
import structlog

from nock_analytics.domain.entities.errors import NockBlocksRPCError
from nock_analytics.domain.gateways.nockblocks_gateway import INockBlocksGateway

logger = structlog.get_logger(__name__)


class NockBlocksGateway(INockBlocksGateway):
    """Implementation of the NockBlocks gateway using an HTTP client."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        user_agent: str = "NockChain-Analytics/1.0",
    ):
        """
        Initialize the NockBlocks gateway.

        Args:
            rpc_url: JSON-RPC endpoint (e.g. "https://nockblocks.com/rpc")
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every call
        """
        self.rpc_url = rpc_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def _build_payload(self, method: str, params: List[Any]) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": f"api_{int(time.time() * 1000)}",
        }

    async def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        payload = self._build_payload(method, params or [])
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

        logger.info("nockblocks.rpc.request", method=method, url=self.rpc_url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.rpc_url, json=payload, headers=headers
                )
                response.raise_for_status()
                body = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "nockblocks.rpc.http_error",
                method=method,
                status_code=e.response.status_code,
                response_text=e.response.text,
            )
            raise NockBlocksRPCError(
                f"HTTP error! status: {e.response.status_code}",
                details={"method": method, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("nockblocks.rpc.request_error", method=method, error=str(e))
            raise NockBlocksRPCError(
                f"NockBlocks request failed: {str(e)}", details={"method": method}
            ) from e

        except ValueError as e:
            logger.error("nockblocks.rpc.invalid_json", method=method, error=str(e))
            raise NockBlocksRPCError(
                "NockBlocks returned a non-JSON response", details={"method": method}
            ) from e

        if not isinstance(body, dict):
            raise NockBlocksRPCError(
                "Malformed JSON-RPC response", details={"method": method}
            )

        error = body.get("error")
        if error:
            if isinstance(error, dict):
                message = error.get("message", "Unknown error")
                code = error.get("code")
            else:
                message, code = str(error), None
            logger.error(
                "nockblocks.rpc.error", method=method, code=code, message=message
            )
            raise NockBlocksRPCError(
                f"RPC Error: {message}", code=code, details={"method": method}
            )

        logger.info("nockblocks.rpc.success", method=method)
        return body.get("result")

    async def get_tip(self) -> Dict[str, Any]:
        result = await self.call("getTip")
        if not isinstance(result, dict):
            raise NockBlocksRPCError(
                "No tip data received", details={"method": "getTip"}
            )
        return result

    async def get_proof_rate_history(
        self,
        start_height: int,
        end_height: int,
        max_samples: int,
        smoothing_type: str,
    ) -> Dict[str, Any]:
        result = await self.call(
            "getProofRateHistory",
            [
                {
                    "startHeight": start_height,
                    "endHeight": end_height,
                    "maxSamples": max_samples,
                    "smoothingType": smoothing_type,
                }
            ],
        )
        if not isinstance(result, dict) or not result.get("data"):
            raise NockBlocksRPCError(
                "No proofrate data received",
                details={"method": "getProofRateHistory"},
            )
        return result

    async def get_wallet_growth_metrics(
        self, window_size: int, data_points: int
    ) -> Dict[str, Any]:
        result = await self.call(
            "getWalletGrowthMetrics",
            [{"windowSize": window_size, "dataPoints": data_points}],
        )
        if not isinstance(result, dict) or not result.get("windows"):
            raise NockBlocksRPCError(
                "No wallet growth data received",
                details={"method": "getWalletGrowthMetrics"},
            )
        return result
