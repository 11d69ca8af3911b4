import yaml

from lore_parser.errors import GrammarError


class GameObject:
    def __init__(self, id, data):
        self.id = id
        self.name = data.get('name', id)
        self.aliases = data.get('aliases') or []
        if isinstance(self.aliases, str):
            self.aliases = [self.aliases]
        if not isinstance(self.aliases, list):
            raise GrammarError(f"Object {id!r}: aliases must be a list, got {self.aliases!r}.")
        if not isinstance(self.name, str):
            raise GrammarError(f"Object {id!r}: name {self.name!r} must be text.")
        for alias in self.aliases:
            if not isinstance(alias, str):
                raise GrammarError(f"Object {self.name!r}: alias {alias!r} must be text.")

        self.description = data.get('description', "")

        # Name words first, then any alias words not already present
        self.words = tuple(self.name.lower().split())
        for alias in self.aliases:
            for word in alias.lower().split():
                if word not in self.words:
                    self.words += (word,)

    def __repr__(self):
        return f"GameObject({self.name!r})"


class Scene:
    def __init__(self, id, data):
        self.id = id
        self.name = data.get('name', id)
        self.description = data.get('description', "")
        self.objects = []

        for index, obj_data in enumerate(data.get('objects') or []):
            if isinstance(obj_data, str):
                obj_data = {'name': obj_data}
            if not isinstance(obj_data, dict):
                raise GrammarError(f"Scene {id!r}: object {obj_data!r} must be a name or a mapping.")
            obj_id = obj_data.get('id', obj_data.get('name', f"{id}-{index}"))
            self.objects.append(GameObject(obj_id, obj_data))


class World:
    """
    The objects the player can refer to. Only the current scene is in scope.
    """

    def __init__(self, data):
        self.title = data.get('title', 'Untitled')
        self.scenes = {}
        for scene_data in data.get('scenes') or []:
            if 'id' not in scene_data:
                raise GrammarError("Every scene needs an 'id'.")
            self.scenes[scene_data['id']] = Scene(scene_data['id'], scene_data)

        if not self.scenes:
            raise GrammarError("World has no scenes.")

        self.current_scene = data.get('start_scene', next(iter(self.scenes)))
        if self.current_scene not in self.scenes:
            raise GrammarError(f"Start scene '{self.current_scene}' does not exist.")

    def get_scene(self):
        return self.scenes[self.current_scene]

    def entities_in_scope(self):
        return list(self.get_scene().objects)


def load_world(path):
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise GrammarError("World document must be a mapping with 'scenes'.")
    return World(data)
