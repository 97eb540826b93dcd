import pytest
import yaml

from mandel.datatypes import RenderRequest, Viewport
from mandel.settings import dict_to_settings, load_settings, save_settings, settings_to_dict

REQUEST = RenderRequest(Viewport(320, 240, complex(-1.2, 0.35), complex(-1.0, 0.2)), 500, workers=6)


def test_saved_settings_load_back(tmp_path):
    path = tmp_path / "view.yaml"
    save_settings(path, REQUEST, "fire")

    request, colormap = load_settings(path)
    assert request == REQUEST
    assert colormap == "fire"


def test_settings_file_layout(tmp_path):
    path = tmp_path / "view.yaml"
    save_settings(path, REQUEST)
    with open(path) as file:
        data = yaml.safe_load(file)
    assert data["image"] == {"width": 320, "height": 240}
    assert data["location"]["upper_left"] == {"re": -1.2, "im": 0.35}
    assert data["computation"] == {"iterations": 500, "workers": 6}
    assert data["presentation"]["colormap"] == "grayscale"


def test_workers_and_presentation_are_optional():
    settings = settings_to_dict(REQUEST)
    del settings["computation"]["workers"]
    del settings["presentation"]
    request, colormap = dict_to_settings(settings)
    assert request.workers is None
    assert colormap == "grayscale"


def test_missing_setting():
    settings = settings_to_dict(REQUEST)
    del settings["location"]["lower_right"]
    with pytest.raises(ValueError, match="lower_right"):
        dict_to_settings(settings)


def test_invalid_values_are_rejected():
    settings = settings_to_dict(REQUEST)
    settings["computation"]["iterations"] = -5
    with pytest.raises(ValueError):
        dict_to_settings(settings)


def test_file_without_settings(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("just a string\n")
    with pytest.raises(ValueError):
        load_settings(path)


def test_broken_yaml_is_invalid_input(tmp_path):
    path = tmp_path / "view.yaml"
    path.write_text("image: [unclosed\n")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_settings(path)


def test_empty_presentation_section_keeps_default_colormap():
    settings = settings_to_dict(REQUEST, "fire")
    settings["presentation"] = None
    request, colormap = dict_to_settings(settings)
    assert request == REQUEST
    assert colormap == "grayscale"


@pytest.mark.parametrize("section", ["image", "location", "computation", "presentation"])
def test_non_mapping_section(section):
    settings = settings_to_dict(REQUEST)
    settings[section] = "oops"
    with pytest.raises(ValueError):
        dict_to_settings(settings)
