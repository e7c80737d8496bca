ASSETS_PATH: str = "./assets/"
# Bare scene names given on the command line are looked up here
SCENES_PATH: str = ASSETS_PATH + "scenes/"
