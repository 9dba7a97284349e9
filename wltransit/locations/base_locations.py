"""
Regular Locations

Location codes for every regular location (one per data block) and the
mapping between block coordinates and location codes.

Game 0 holds the original campaign's twenty blocks, including the world map.
Game 1 holds the remaining twenty-two blocks.
"""

from typing import Dict, List

from wltransit.constants import LOCATION_PREVIOUS
from wltransit.decode.state import BlockZIP
from wltransit.errors import ResolutionError

# Game 0 blocks
BLOCK0_HIGHPOOL = 0
BLOCK0_AG_CENTER = 1
BLOCK0_VERMIN_CAVE = 2
BLOCK0_DESERT_NOMADS = 3
BLOCK0_QUARTZ = 4
BLOCK0_UGLYS_HIDEOUT = 5
BLOCK0_SCOTTS_BAR = 6
BLOCK0_STAGE_COACH_INN = 7
BLOCK0_COURTHOUSE = 8
BLOCK0_QUARTZ_DERELICT_BUILDINGS = 9
BLOCK0_NEEDLES = 10
BLOCK0_NEEDLES_DOWNTOWN_WEST = 11
BLOCK0_NEEDLES_DOWNTOWN_EAST = 12
BLOCK0_POLICE_STATION = 13
BLOCK0_WASTE_PIT = 14
BLOCK0_TEMPLE_MUSHROOM = 15
BLOCK0_SLEEPER_BASE_LEVEL1 = 16
BLOCK0_SLEEPER_BASE_LEVEL2 = 17
BLOCK0_SLEEPER_BASE_LEVEL3 = 18
BLOCK0_WORLD_MAP = 19

# Game 1 blocks
BLOCK1_LAS_VEGAS = 0
BLOCK1_LAS_VEGAS_DERELICT_BUILDINGS = 1
BLOCK1_FAT_FREDDYS = 2
BLOCK1_SPADES_CASINO = 3
BLOCK1_LAS_VEGAS_SEWERS_WEST = 4
BLOCK1_LAS_VEGAS_SEWERS_EAST = 5
BLOCK1_DARWIN = 6
BLOCK1_DARWIN_BASE = 7
BLOCK1_FINSTERS_BRAIN = 8
BLOCK1_BLOOD_TEMPLE_TOP = 9
BLOCK1_BLOOD_TEMPLE_BOTTOM = 10
BLOCK1_FARAN_BRYGOS = 11
BLOCK1_GUARDIAN_CITADEL_ENTRANCE = 12
BLOCK1_GUARDIAN_CITADEL_OUTER = 13
BLOCK1_GUARDIAN_CITADEL_INNER = 14
BLOCK1_BASE_COCHISE_OUTSIDE = 15
BLOCK1_BASE_COCHISE_LEVEL1 = 16
BLOCK1_BASE_COCHISE_LEVEL2 = 17
BLOCK1_BASE_COCHISE_LEVEL3 = 18
BLOCK1_BASE_COCHISE_LEVEL4 = 19
BLOCK1_MINE_SHAFT = 20
BLOCK1_SAVAGE_VILLAGE = 21

# Regular location codes
LOCATION_HIGHPOOL = 0
LOCATION_AG_CENTER = 1
LOCATION_VERMIN_CAVE = 2
LOCATION_DESERT_NOMADS = 3
LOCATION_QUARTZ = 4
LOCATION_UGLYS_HIDEOUT = 5
LOCATION_SCOTTS_BAR = 6
LOCATION_STAGE_COACH_INN = 7
LOCATION_COURTHOUSE = 8
LOCATION_QUARTZ_DERELICT_BUILDINGS = 9
LOCATION_NEEDLES = 10
LOCATION_NEEDLES_DOWNTOWN_WEST = 11
LOCATION_NEEDLES_DOWNTOWN_EAST = 12
LOCATION_POLICE_STATION = 13
LOCATION_WASTE_PIT = 14
LOCATION_TEMPLE_MUSHROOM = 15
LOCATION_SLEEPER_BASE_LEVEL1 = 16
LOCATION_SLEEPER_BASE_LEVEL2 = 17
LOCATION_SLEEPER_BASE_LEVEL3 = 18
LOCATION_WORLD_MAP = 19
LOCATION_LAS_VEGAS = 20
LOCATION_LAS_VEGAS_DERELICT_BUILDINGS = 21
LOCATION_FAT_FREDDYS = 22
LOCATION_SPADES_CASINO = 23
LOCATION_LAS_VEGAS_SEWERS_WEST = 24
LOCATION_LAS_VEGAS_SEWERS_EAST = 25
LOCATION_DARWIN = 26
LOCATION_DARWIN_BASE = 27
LOCATION_FINSTERS_BRAIN = 28
LOCATION_BLOOD_TEMPLE_TOP = 29
LOCATION_BLOOD_TEMPLE_BOTTOM = 30
LOCATION_FARAN_BRYGOS = 31
LOCATION_GUARDIAN_CITADEL_ENTRANCE = 32
LOCATION_GUARDIAN_CITADEL_OUTER = 33
LOCATION_GUARDIAN_CITADEL_INNER = 34
LOCATION_BASE_COCHISE_OUTSIDE = 35
LOCATION_BASE_COCHISE_LEVEL1 = 36
LOCATION_BASE_COCHISE_LEVEL2 = 37
LOCATION_BASE_COCHISE_LEVEL3 = 38
LOCATION_BASE_COCHISE_LEVEL4 = 39
LOCATION_MINE_SHAFT = 40
LOCATION_SAVAGE_VILLAGE = 41

# Location code of each block, indexed [game_idx][block_idx]
GAME_BLOCK_LOCATIONS: List[List[int]] = [
    [
        LOCATION_HIGHPOOL,
        LOCATION_AG_CENTER,
        LOCATION_VERMIN_CAVE,
        LOCATION_DESERT_NOMADS,
        LOCATION_QUARTZ,
        LOCATION_UGLYS_HIDEOUT,
        LOCATION_SCOTTS_BAR,
        LOCATION_STAGE_COACH_INN,
        LOCATION_COURTHOUSE,
        LOCATION_QUARTZ_DERELICT_BUILDINGS,
        LOCATION_NEEDLES,
        LOCATION_NEEDLES_DOWNTOWN_WEST,
        LOCATION_NEEDLES_DOWNTOWN_EAST,
        LOCATION_POLICE_STATION,
        LOCATION_WASTE_PIT,
        LOCATION_TEMPLE_MUSHROOM,
        LOCATION_SLEEPER_BASE_LEVEL1,
        LOCATION_SLEEPER_BASE_LEVEL2,
        LOCATION_SLEEPER_BASE_LEVEL3,
        LOCATION_WORLD_MAP,
    ],
    [
        LOCATION_LAS_VEGAS,
        LOCATION_LAS_VEGAS_DERELICT_BUILDINGS,
        LOCATION_FAT_FREDDYS,
        LOCATION_SPADES_CASINO,
        LOCATION_LAS_VEGAS_SEWERS_WEST,
        LOCATION_LAS_VEGAS_SEWERS_EAST,
        LOCATION_DARWIN,
        LOCATION_DARWIN_BASE,
        LOCATION_FINSTERS_BRAIN,
        LOCATION_BLOOD_TEMPLE_TOP,
        LOCATION_BLOOD_TEMPLE_BOTTOM,
        LOCATION_FARAN_BRYGOS,
        LOCATION_GUARDIAN_CITADEL_ENTRANCE,
        LOCATION_GUARDIAN_CITADEL_OUTER,
        LOCATION_GUARDIAN_CITADEL_INNER,
        LOCATION_BASE_COCHISE_OUTSIDE,
        LOCATION_BASE_COCHISE_LEVEL1,
        LOCATION_BASE_COCHISE_LEVEL2,
        LOCATION_BASE_COCHISE_LEVEL3,
        LOCATION_BASE_COCHISE_LEVEL4,
        LOCATION_MINE_SHAFT,
        LOCATION_SAVAGE_VILLAGE,
    ],
]

LOCATION_NAME_MAP: Dict[int, str] = {
    LOCATION_HIGHPOOL: "Highpool",
    LOCATION_AG_CENTER: "AgCenter",
    LOCATION_VERMIN_CAVE: "VerminCave",
    LOCATION_DESERT_NOMADS: "DesertNomads",
    LOCATION_QUARTZ: "Quartz",
    LOCATION_UGLYS_HIDEOUT: "UglysHideout",
    LOCATION_SCOTTS_BAR: "ScottsBar",
    LOCATION_STAGE_COACH_INN: "StageCoachInn",
    LOCATION_COURTHOUSE: "Courthouse",
    LOCATION_QUARTZ_DERELICT_BUILDINGS: "QuartzDerelictBuildings",
    LOCATION_NEEDLES: "Needles",
    LOCATION_NEEDLES_DOWNTOWN_WEST: "NeedlesDowntownWest",
    LOCATION_NEEDLES_DOWNTOWN_EAST: "NeedlesDowntownEast",
    LOCATION_POLICE_STATION: "PoliceStation",
    LOCATION_WASTE_PIT: "WastePit",
    LOCATION_TEMPLE_MUSHROOM: "TempleMushroom",
    LOCATION_SLEEPER_BASE_LEVEL1: "SleeperBaseLevel1",
    LOCATION_SLEEPER_BASE_LEVEL2: "SleeperBaseLevel2",
    LOCATION_SLEEPER_BASE_LEVEL3: "SleeperBaseLevel3",
    LOCATION_WORLD_MAP: "WorldMap",
    LOCATION_LAS_VEGAS: "LasVegas",
    LOCATION_LAS_VEGAS_DERELICT_BUILDINGS: "LasVegasDerelictBuildings",
    LOCATION_FAT_FREDDYS: "FatFreddys",
    LOCATION_SPADES_CASINO: "SpadesCasino",
    LOCATION_LAS_VEGAS_SEWERS_WEST: "LasVegasSewersWest",
    LOCATION_LAS_VEGAS_SEWERS_EAST: "LasVegasSewersEast",
    LOCATION_DARWIN: "Darwin",
    LOCATION_DARWIN_BASE: "DarwinBase",
    LOCATION_FINSTERS_BRAIN: "FinstersBrain",
    LOCATION_BLOOD_TEMPLE_TOP: "BloodTempleTop",
    LOCATION_BLOOD_TEMPLE_BOTTOM: "BloodTempleBottom",
    LOCATION_FARAN_BRYGOS: "FaranBrygos",
    LOCATION_GUARDIAN_CITADEL_ENTRANCE: "GuardianCitadelEntrance",
    LOCATION_GUARDIAN_CITADEL_OUTER: "GuardianCitadelOuter",
    LOCATION_GUARDIAN_CITADEL_INNER: "GuardianCitadelInner",
    LOCATION_BASE_COCHISE_OUTSIDE: "BaseCochiseOutside",
    LOCATION_BASE_COCHISE_LEVEL1: "BaseCochiseLevel1",
    LOCATION_BASE_COCHISE_LEVEL2: "BaseCochiseLevel2",
    LOCATION_BASE_COCHISE_LEVEL3: "BaseCochiseLevel3",
    LOCATION_BASE_COCHISE_LEVEL4: "BaseCochiseLevel4",
    LOCATION_MINE_SHAFT: "MineShaft",
    LOCATION_SAVAGE_VILLAGE: "SavageVillage",
    LOCATION_PREVIOUS: "Previous",
}


def block_count(game_idx: int) -> int:
    """Number of blocks in a game."""
    if not 0 <= game_idx < len(GAME_BLOCK_LOCATIONS):
        raise ResolutionError(f"invalid game index: {game_idx}")
    return len(GAME_BLOCK_LOCATIONS[game_idx])


def block_zip_to_loc(zip_: BlockZIP) -> int:
    """
    Resolve a block coordinate to its regular location code.

    Raises:
        ResolutionError: if the coordinate does not name a block
    """
    if not 0 <= zip_.game_idx < len(GAME_BLOCK_LOCATIONS):
        raise ResolutionError(f"invalid block coordinate: game={zip_.game_idx} "
                              f"block={zip_.block_idx}: no such game")

    locations = GAME_BLOCK_LOCATIONS[zip_.game_idx]
    if not 0 <= zip_.block_idx < len(locations):
        raise ResolutionError(f"invalid block coordinate: game={zip_.game_idx} "
                              f"block={zip_.block_idx}: game has {len(locations)} blocks")

    return locations[zip_.block_idx]


def loc_to_block_zip(loc: int) -> BlockZIP:
    """
    Resolve a regular location code to the block that holds it.

    Raises:
        ResolutionError: if the code is not a regular location
    """
    for game_idx, locations in enumerate(GAME_BLOCK_LOCATIONS):
        for block_idx, block_loc in enumerate(locations):
            if block_loc == loc:
                return BlockZIP(game_idx, block_idx)

    raise ResolutionError(f"location {loc} is not held by any block")
