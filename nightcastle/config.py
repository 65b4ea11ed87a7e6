"""Game-wide constants: screen geometry, resource paths and physics values."""

CLASS_NAME = "CastleVania"
TITLE = "Castle Vania Jajaou"

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

GRIDCONTAINER_WIDTH = 512.0

KEYBOARD_BUFFER_SIZE = 1024

BACKGROUND_COLOR = (0, 0, 0)
VIEWPORT_WIDTH = 552
VIEWPORT_HEIGHT = 382
BACK_WIDTH = VIEWPORT_WIDTH
BACK_HEIGHT = VIEWPORT_HEIGHT
MAX_FRAME_RATE = 60

CAMERA_UPDATE_RIGHT = VIEWPORT_WIDTH * 0.4
CAMERA_UPDATE_LEFT = VIEWPORT_WIDTH * 0.2
CAMERA_UPDATE_BOTTOM = VIEWPORT_HEIGHT * 2 / 3
CAMERA_UPDATE_TOP = VIEWPORT_HEIGHT / 3
LEFT_CAMERA_INTRO_BLOCK = 0
RIGHT_CAMERA_INTRO_BLOCK = 1504

TILE_SIZE = 32
LEVEL1_TILE_BACKGROUNDMAP_FILEPATH = "gamedata/Resources/Map/lv1/lv1_BGMap.txt"
MENU_BACKGROUND_FILEPATH = "gamedata/Resources/Background/start_game.png"
MENU_BACKGROUND_ID = 9999
OBJECTS_MAP1_FILEPATH = "gamedata/Resources/Map/lv1/Objects.txt"
OBJECTS_INTRO_FILEPATH = "gamedata/Resources/Map/intro/Objects.txt"
MAP1_TILESHEET_INFO_FILEPATH = "gamedata/Resources/Map/lv1/lv1_tilesheetINFO.txt"
INTRO_BACKGROUND_FILEPATH = "Data/Map/intro/intro.png"
INTRO_BACKGROUND_ID = 9997
TEX_BBOX_FILEPATH = "gamedata/Resources/bbox.png"
INTRO_TILESHEET_INFO_FILEPATH = "gamedata/Resources/Map/intro/intro_tilesheetINFO.txt"
SIMON_DATA_FILEPATH = "gamedata/Resources/simonTextData.txt"

ID_TEX_BBOX = -100
ID_GROUND = 333
ID_GROUND2 = 334
ID_GROUND3 = 335
ID_GROUND_INTRO = 336

ITEM_GRAVITY = 0.00098