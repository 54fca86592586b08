ASSETS_PATH: str = "./assets/"
TEXTURES_PATH: str = ASSETS_PATH + "textures/"
MODELS_PATH: str = ASSETS_PATH + "models/"

# Toon shading ramp sampled by the section meshes
GRADIENT_TEXTURE_PATH: str = TEXTURES_PATH + "gradients/3.jpg"

# Model shown next to the second section
MODEL_PATH: str = MODELS_PATH + "scene.gltf"
