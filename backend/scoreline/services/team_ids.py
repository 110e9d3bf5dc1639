"""NBA stats team ids (1610612xxx) -> ESPN team ids."""

from __future__ import annotations

import math

NBA_TEAM_ID_TO_ESPN_ID: dict[int, int] = {
    1610612737: 1,   # ATL
    1610612738: 2,   # BOS
    1610612739: 5,   # CLE
    1610612740: 3,   # NOP
    1610612741: 4,   # CHI
    1610612742: 6,   # DAL
    1610612743: 7,   # DEN
    1610612744: 9,   # GSW
    1610612745: 10,  # HOU
    1610612746: 12,  # LAC
    1610612747: 13,  # LAL
    1610612748: 14,  # MIA
    1610612749: 15,  # MIL
    1610612750: 16,  # MIN
    1610612751: 17,  # BKN
    1610612752: 18,  # NYK
    1610612753: 19,  # ORL
    1610612754: 11,  # IND
    1610612755: 20,  # PHI
    1610612756: 21,  # PHX
    1610612757: 22,  # POR
    1610612758: 23,  # SAC
    1610612759: 24,  # SAS
    1610612760: 25,  # OKC
    1610612761: 28,  # TOR
    1610612762: 26,  # UTA
    1610612763: 29,  # MEM
    1610612764: 27,  # WAS
    1610612765: 8,   # DET
    1610612766: 30,  # CHA
}


def to_espn_team_id(raw: object) -> int | None:
    """ESPN id for an ESPN or NBA stats id; None for missing/non-numeric/non-positive input."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        num = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(num) or num <= 0 or num != int(num):
        return None
    team_id = int(num)
    return NBA_TEAM_ID_TO_ESPN_ID.get(team_id, team_id)
