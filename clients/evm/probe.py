import asyncio
import logging
from typing import Any

import aiohttp

from clients.evm.dto import ProbeResult
from clients.evm.errors import ChainIdMismatch, ProbeError
from config import settings
from models.dtos import ConnectionConfig
from services.endpoint import clean_value, mask_secret, resolve

module_logger = logging.getLogger(__name__)

PROBE_HEADERS = {"Content-Type": "application/json"}


def build_probe_payload() -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "method": "eth_chainId",
        "params": [],
        "id": 1,
    }


async def probe_rpc(
    rpc_url: str,
    session: aiohttp.ClientSession | None = None,
    timeout: float | None = None,
) -> ProbeResult:
    """Send eth_chainId to rpc_url and require a 2xx answer."""
    client_timeout = aiohttp.ClientTimeout(total=timeout or settings.RPC_PROBE_TIMEOUT)

    if session is None:
        async with aiohttp.ClientSession() as client:
            return await _post_probe(client, rpc_url, client_timeout)

    return await _post_probe(session, rpc_url, client_timeout)


async def _post_probe(
    client: aiohttp.ClientSession,
    rpc_url: str,
    timeout: aiohttp.ClientTimeout,
) -> ProbeResult:
    try:
        async with client.post(
            rpc_url,
            json=build_probe_payload(),
            headers=PROBE_HEADERS,
            timeout=timeout,
        ) as resp:
            status = resp.status
            if not 200 <= status < 300:
                raise ProbeError(rpc_url, f"HTTP {status}", status)

            try:
                data = await resp.json(content_type=None)
            except ValueError:
                module_logger.warning(f"RPC answered {status} with a non-JSON body")
                data = None
    except asyncio.TimeoutError:
        raise ProbeError(rpc_url, "timed out")
    except aiohttp.ClientError as e:
        raise ProbeError(rpc_url, str(e))

    return ProbeResult(
        rpc_url=rpc_url,
        status=status,
        chain_id=_parse_chain_id(rpc_url, data),
    )


def _parse_chain_id(rpc_url: str, data: Any) -> int | None:
    if not isinstance(data, dict):
        return None

    if "error" in data:
        error = data["error"] or {}
        message = error.get("message", "Unknown RPC error") if isinstance(error, dict) else str(error)
        raise ProbeError(rpc_url, message)

    result = data.get("result")
    if not isinstance(result, str):
        return None

    try:
        return int(result, 16)
    except ValueError:
        return None


async def verify_credentials(
    credentials: dict[str, Any],
    session: aiohttp.ClientSession | None = None,
) -> ProbeResult:
    config = ConnectionConfig.from_credentials(credentials)
    resolved = resolve(config)
    masked_url = mask_secret(resolved.rpc_url, clean_value(config.api_key))

    module_logger.info(f"Testing RPC connection -> {masked_url}")

    result = await probe_rpc(resolved.rpc_url, session)

    if result.chain_id is not None and result.chain_id != resolved.chain_id:
        raise ChainIdMismatch(resolved.chain_id, result.chain_id)

    return result
