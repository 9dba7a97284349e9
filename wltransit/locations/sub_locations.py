"""
Sub-Locations

Sub-locations are areas inside another block's map that are treated as
separate locations (a cave under a town, a back room of a casino). They have
no block of their own; they are recognized only through the transition slots
that lead into or out of them.
"""

from typing import Dict, Optional

from wltransit.constants import SUB_LOCATION_MIN
from wltransit.locations import base_locations as base
from wltransit.locations.data_types import SubLocDesc, SubLocOverride

SUB_LOCATION_HIGHPOOL_CAVE = SUB_LOCATION_MIN
SUB_LOCATION_HIGHPOOL_COMMUNITY_CENTER = 257
SUB_LOCATION_HIGHPOOL_WORKSHOP = 258

SUB_LOCATION_AG_CENTER_ROOT_CELLAR = 259

SUB_LOCATION_DESERT_NOMADS_TENT = 260

SUB_LOCATION_UGLYS_HIDEOUT_ALLEY = 261

SUB_LOCATION_NEEDLES_BISHOPS_OFFICE = 262
SUB_LOCATION_NEEDLES_GARAGE = 263
SUB_LOCATION_NEEDLES_POLICE_STATION = 264
SUB_LOCATION_NEEDLES_AMMO_BUNKER = 265

SUB_LOCATION_DARWIN_BLACK_MARKET = 266
SUB_LOCATION_DARWIN_LAB = 267
SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN = 268

SUB_LOCATION_LAS_VEGAS_JAIL = 269
SUB_LOCATION_LAS_VEGAS_PROTON_AX_ROOM = 270

SUB_LOCATION_SPADES_CASINO_WINE_CELLAR = 271
SUB_LOCATION_SPADES_CASINO_LEVEL2 = 272
SUB_LOCATION_SPADES_CASINO_BASEMENT = 273

SUB_LOCATION_NAME_MAP: Dict[int, str] = {
    SUB_LOCATION_HIGHPOOL_CAVE: "HighpoolCave",
    SUB_LOCATION_HIGHPOOL_COMMUNITY_CENTER: "HighpoolCommunityCenter",
    SUB_LOCATION_HIGHPOOL_WORKSHOP: "HighpoolWorkshop",
    SUB_LOCATION_AG_CENTER_ROOT_CELLAR: "AgCenterRootCellar",
    SUB_LOCATION_DESERT_NOMADS_TENT: "DesertNomadsTent",
    SUB_LOCATION_UGLYS_HIDEOUT_ALLEY: "UglysHideoutAlley",
    SUB_LOCATION_NEEDLES_BISHOPS_OFFICE: "NeedlesBishopsOffice",
    SUB_LOCATION_NEEDLES_GARAGE: "NeedlesGarage",
    SUB_LOCATION_NEEDLES_POLICE_STATION: "NeedlesPoliceStation",
    SUB_LOCATION_NEEDLES_AMMO_BUNKER: "NeedlesAmmoBunker",
    SUB_LOCATION_DARWIN_BLACK_MARKET: "DarwinBlackMarket",
    SUB_LOCATION_DARWIN_LAB: "DarwinLab",
    SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN: "DarwinBlackGilaTavern",
    SUB_LOCATION_LAS_VEGAS_JAIL: "LasVegasJail",
    SUB_LOCATION_LAS_VEGAS_PROTON_AX_ROOM: "LasVegasProtonAxRoom",
    SUB_LOCATION_SPADES_CASINO_WINE_CELLAR: "SpadesCasinoWineCellar",
    SUB_LOCATION_SPADES_CASINO_LEVEL2: "SpadesCasinoLevel2",
    SUB_LOCATION_SPADES_CASINO_BASEMENT: "SpadesCasinoBasement",
}


def _enter(sub_loc: int) -> SubLocOverride:
    """Slot in the parent block that leads into the sub-location."""
    return SubLocOverride(None, sub_loc)


def _leave(sub_loc: int, to_loc: Optional[int] = None) -> SubLocOverride:
    """Slot that leads out of the sub-location."""
    return SubLocOverride(sub_loc, to_loc)


# Transition slots that actually lead to or from a sub-location
SUB_LOC_MAP: Dict[SubLocDesc, SubLocOverride] = {
    # Highpool
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 1): _enter(SUB_LOCATION_HIGHPOOL_CAVE),
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 2): _leave(SUB_LOCATION_HIGHPOOL_CAVE),
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 3): _enter(SUB_LOCATION_HIGHPOOL_COMMUNITY_CENTER),
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 4): _leave(SUB_LOCATION_HIGHPOOL_COMMUNITY_CENTER),
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 5): _enter(SUB_LOCATION_HIGHPOOL_WORKSHOP),
    SubLocDesc(0, base.BLOCK0_HIGHPOOL, 6): _leave(SUB_LOCATION_HIGHPOOL_WORKSHOP),

    # Ag Center (the root cellar is left through the vermin cave)
    SubLocDesc(0, base.BLOCK0_AG_CENTER, 3): _enter(SUB_LOCATION_AG_CENTER_ROOT_CELLAR),
    SubLocDesc(0, base.BLOCK0_VERMIN_CAVE, 0): _leave(SUB_LOCATION_AG_CENTER_ROOT_CELLAR),

    # Desert Nomads
    SubLocDesc(0, base.BLOCK0_DESERT_NOMADS, 1): _enter(SUB_LOCATION_DESERT_NOMADS_TENT),
    SubLocDesc(0, base.BLOCK0_DESERT_NOMADS, 12): _enter(SUB_LOCATION_DESERT_NOMADS_TENT),
    SubLocDesc(0, base.BLOCK0_DESERT_NOMADS, 13): _leave(SUB_LOCATION_DESERT_NOMADS_TENT),

    # Quartz
    SubLocDesc(0, base.BLOCK0_QUARTZ, 92): _enter(SUB_LOCATION_UGLYS_HIDEOUT_ALLEY),
    SubLocDesc(0, base.BLOCK0_UGLYS_HIDEOUT, 1): _leave(SUB_LOCATION_UGLYS_HIDEOUT_ALLEY),

    # Needles
    SubLocDesc(0, base.BLOCK0_NEEDLES, 8): _enter(SUB_LOCATION_NEEDLES_BISHOPS_OFFICE),
    SubLocDesc(0, base.BLOCK0_POLICE_STATION, 6): _leave(SUB_LOCATION_NEEDLES_BISHOPS_OFFICE),
    SubLocDesc(0, base.BLOCK0_NEEDLES, 9): _enter(SUB_LOCATION_NEEDLES_POLICE_STATION),
    SubLocDesc(0, base.BLOCK0_POLICE_STATION, 3): _leave(SUB_LOCATION_NEEDLES_POLICE_STATION),
    SubLocDesc(0, base.BLOCK0_NEEDLES, 10): _enter(SUB_LOCATION_NEEDLES_GARAGE),
    SubLocDesc(0, base.BLOCK0_POLICE_STATION, 2): _leave(SUB_LOCATION_NEEDLES_GARAGE),
    SubLocDesc(0, base.BLOCK0_NEEDLES, 19): _enter(SUB_LOCATION_NEEDLES_AMMO_BUNKER),
    SubLocDesc(0, base.BLOCK0_WASTE_PIT, 5): _leave(SUB_LOCATION_NEEDLES_AMMO_BUNKER),

    # Darwin Village
    SubLocDesc(1, base.BLOCK1_DARWIN, 3): _enter(SUB_LOCATION_DARWIN_BLACK_MARKET),
    SubLocDesc(1, base.BLOCK1_DARWIN, 1): _leave(SUB_LOCATION_DARWIN_BLACK_MARKET),
    SubLocDesc(1, base.BLOCK1_DARWIN, 10): _leave(SUB_LOCATION_DARWIN_BLACK_MARKET),
    SubLocDesc(1, base.BLOCK1_DARWIN, 11): _leave(SUB_LOCATION_DARWIN_BLACK_MARKET),
    SubLocDesc(1, base.BLOCK1_DARWIN, 4): _enter(SUB_LOCATION_DARWIN_LAB),
    SubLocDesc(1, base.BLOCK1_DARWIN, 2): _leave(SUB_LOCATION_DARWIN_LAB),
    SubLocDesc(1, base.BLOCK1_DARWIN, 5): _enter(SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN),
    SubLocDesc(1, base.BLOCK1_DARWIN, 6): _enter(SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN),
    SubLocDesc(1, base.BLOCK1_DARWIN, 0): _leave(SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN),
    SubLocDesc(1, base.BLOCK1_DARWIN, 9): _leave(SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN),

    # Las Vegas (both rooms are left through Fat Freddy's)
    SubLocDesc(1, base.BLOCK1_LAS_VEGAS, 1): _enter(SUB_LOCATION_LAS_VEGAS_JAIL),
    SubLocDesc(1, base.BLOCK1_FAT_FREDDYS, 6): _leave(SUB_LOCATION_LAS_VEGAS_JAIL,
                                                      base.LOCATION_LAS_VEGAS),
    SubLocDesc(1, base.BLOCK1_LAS_VEGAS, 3): _enter(SUB_LOCATION_LAS_VEGAS_PROTON_AX_ROOM),
    SubLocDesc(1, base.BLOCK1_FAT_FREDDYS, 5): _leave(SUB_LOCATION_LAS_VEGAS_PROTON_AX_ROOM,
                                                      base.LOCATION_LAS_VEGAS),

    # Spade's Casino
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 1): _enter(SUB_LOCATION_SPADES_CASINO_WINE_CELLAR),
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 2): _leave(SUB_LOCATION_SPADES_CASINO_WINE_CELLAR),
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 3): _enter(SUB_LOCATION_SPADES_CASINO_LEVEL2),
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 4): _leave(SUB_LOCATION_SPADES_CASINO_LEVEL2),
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 7): _enter(SUB_LOCATION_SPADES_CASINO_BASEMENT),
    # The basement exit leads out to Las Vegas in the game data. Treat it as a
    # return to the casino so the basement forms a round trip.
    SubLocDesc(1, base.BLOCK1_SPADES_CASINO, 5): _leave(SUB_LOCATION_SPADES_CASINO_BASEMENT,
                                                       base.LOCATION_SPADES_CASINO),
}
