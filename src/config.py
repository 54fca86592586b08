WIDTH = 1280
HEIGHT = 800
FULLSCREEN = False
FPS = 60
VSYNC = True
# Renderer pixel ratio is clamped to this (high-dpi screens render at most 2x)
MAX_PIXEL_RATIO = 2.0
LOG_LEVEL = "INFO"

MATERIAL_COLOR = "#ffffff"
CLEAR_COLOR = (0.0, 0.0, 0.0, 0.0)

# Page layout: one section per viewport height, meshes spaced along -Y
SECTION_SPACING = 4.0
SECTIONS_COUNT = 6
SECTION_TITLES = (
    "Hello",
    "About",
    "Campus",
    "Projects",
    "Skills",
    "Contact",
)
SCROLL_STEP = 120  # pixels per mouse wheel notch

# Camera
CAMERA_FOV = 35
CAMERA_NEAR = 0.1
CAMERA_FAR = 100
CAMERA_BASE_DEPTH = 6.0
PARALLAX_GAIN = 0.5
PARALLAX_SMOOTHING = 5.0  # 1/s, responsiveness of the rig easing toward the cursor

# Decorative meshes spin with elapsed time (rad/s)
MESH_ROTATION_RATE_X = 0.05
MESH_ROTATION_RATE_Y = 0.12
WIREFRAME_LINE_WIDTH = 1.5

# Particles
PARTICLES_COUNT = 800
PARTICLE_SIZE = 0.03
PARTICLE_SPREAD = 10.0

# Directional light (points from position toward the origin)
LIGHT_COLOR = (1.0, 1.0, 1.0)
LIGHT_INTENSITY = 1.0
LIGHT_POSITION = (1.0, 1.0, 0.0)

# Loaded model placement
MODEL_SCALE = 0.06
MODEL_POSITION = (-1.7, -4.6, 0.0)
MODEL_ROTATION = (0.2, 5.5, 0.0)
