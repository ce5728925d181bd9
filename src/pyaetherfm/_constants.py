"""Internal constants shared across the library."""

DEFAULT_GATE_PREFIX = "AetherFM."
DEFAULT_MIN_IPC_VERSION = 1
DEFAULT_VOLUME_STEP = 0.05
DEFAULT_UNAVAILABLE_LABEL = "AetherFM unavailable"

# ------------------------------------------------------------------
# Gate names published by the media service (without prefix)
# ------------------------------------------------------------------

GATE_IPC_VERSION = "IpcVersion"
GATE_FEATURE_FLAGS = "FeatureFlags"
GATE_IS_READY = "IsReady"

GATE_GET_CURRENT_STATION = "GetCurrentStation"
GATE_GET_CURRENT_STATION_URL = "GetCurrentStationUrl"
GATE_GET_STATUS = "GetStatus"

GATE_PLAY = "Play"
GATE_PAUSE = "Pause"
GATE_STOP = "Stop"
GATE_RESUME_LAST = "ResumeLast"
GATE_TOGGLE_PLAY_STOP = "TogglePlayStop"
GATE_OPEN_WINDOW = "OpenWindow"
GATE_TOGGLE_WINDOW = "ToggleWindow"
GATE_OPEN_MINI_PLAYER = "OpenMiniPlayer"
GATE_TOGGLE_MINI_PLAYER = "ToggleMiniPlayer"

GATE_PLAY_BY_URL = "PlayByUrl"
GATE_PLAY_BY_NAME = "PlayByName"

GATE_GET_FAVORITES = "GetFavorites"
GATE_ADD_FAVORITE = "AddFavorite"
GATE_REMOVE_FAVORITE = "RemoveFavorite"

# Older service builds publish the names list under the plural spelling.
FAVORITE_NAME_GATES: tuple[str, ...] = ("GetFavoriteNames", "GetFavoritesNames")

GATE_GET_VOLUME = "GetVolume"
GATE_SET_VOLUME = "SetVolume"

GATE_SUBSCRIBE_STATUS = "SubscribeStatusChanged"
GATE_UNSUBSCRIBE_STATUS = "UnsubscribeStatusChanged"

# ------------------------------------------------------------------
# Volume range
# ------------------------------------------------------------------

VOLUME_MIN = 0.0
VOLUME_MAX = 1.0
