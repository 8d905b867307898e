"""
Player Stats Lookup

Fetches a player's summary statistics from the OverFast API and formats them
for chat. One GET per lookup; no retries, no caching.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from mathbot.contexts.stats.exceptions import StatsLookupError
from mathbot.contexts.stats.logger import _log_debug, _log_error, _log_info

load_dotenv()

OW_STATS_API_URL = os.getenv("OW_STATS_API_URL", "https://overfast-api.tekrop.fr")
STATS_TIMEOUT_S = float(os.getenv("STATS_TIMEOUT_S", "10"))


@dataclass
class AverageStats:
    damage: float
    healing: float


@dataclass
class GeneralStats:
    average: AverageStats
    games_lost: int
    games_won: int
    kda: float
    winrate: float


@dataclass
class PlayerStats:
    """
    Summary statistics for one player.

    Only the fields shown in chat are decoded; everything else in the
    response is ignored.
    """

    general: GeneralStats

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "PlayerStats":
        """
        Build from the decoded /stats/summary response.

        Raises:
            KeyError, TypeError, ValueError: If the payload does not have the expected shape
        """
        general = payload["general"]
        average = general["average"]
        return cls(
            general=GeneralStats(
                average=AverageStats(
                    damage=float(average["damage"]),
                    healing=float(average["healing"]),
                ),
                games_lost=int(general["games_lost"]),
                games_won=int(general["games_won"]),
                kda=float(general["kda"]),
                winrate=float(general["winrate"]),
            )
        )


def normalize_player(player: str) -> str:
    """
    Turn a BattleTag as users type it into the API's player id.

    Examples:
        normalize_player("Some Player#1234")
        # "SomePlayer-1234"
    """
    return player.replace("#", "-").replace(" ", "")


async def fetch_player_stats(
    player: str,
    client: Optional[httpx.AsyncClient] = None,
    base_url: str = OW_STATS_API_URL,
) -> PlayerStats:
    """
    Fetch summary stats for a player.

    Args:
        player: Player name as typed by the user (normalized here)
        client: Shared httpx client (default: a short-lived client per call)
        base_url: API root

    Returns:
        Decoded PlayerStats

    Raises:
        StatsLookupError: On transport failure, non-2xx status, or unexpected JSON
    """
    player = normalize_player(player)
    url = f"{base_url.rstrip('/')}/players/{player}/stats/summary"
    _log_info(f"Fetching stats for {player}")
    _log_debug(f"  GET {url}")

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=STATS_TIMEOUT_S)

    try:
        response = await client.get(url)
        response.raise_for_status()
        stats = PlayerStats.from_json(response.json())
    except httpx.HTTPStatusError as e:
        _log_error(f"Request status for {player}: {e.response.status_code}")
        raise StatsLookupError(
            "Stats request failed", player=player, status_code=e.response.status_code
        ) from e
    except httpx.HTTPError as e:
        _log_error(f"Request error for {player}: {e!r}")
        raise StatsLookupError("Stats request failed", player=player, original_error=e) from e
    except (KeyError, TypeError, ValueError) as e:
        _log_error(f"JSON parse error for {player}: {e!r}")
        raise StatsLookupError(
            "Unexpected stats response", player=player, original_error=e
        ) from e
    finally:
        if owns_client:
            await client.aclose()

    return stats


def format_player_stats(player: str, stats: PlayerStats) -> str:
    """Format stats as the chat message shown to users."""
    general = stats.general
    return (
        f"**STATS FOR PLAYER {normalize_player(player)}**\n"
        f"📊      **KDA:** {general.kda}\n"
        f"📊      **Winrate:** {general.winrate}%\n"
        f"💣      **Average Damage:** {general.average.damage}\n"
        f"💛      **Average Healing:** {general.average.healing}\n"
        f"📈      **Games Won:** {general.games_won}\n"
        f"📉      **Games Lost:** {general.games_lost}"
    )
