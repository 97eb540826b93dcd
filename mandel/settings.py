import os
import logging

import yaml

from mandel.datatypes import RenderRequest, Viewport


def available_workers():
    """Number of CPUs this process may run on."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0))
    return os.cpu_count() or 1


def resolve_workers(workers):
    if workers is None:
        return available_workers()
    return workers


def settings_to_dict(request, colormap="grayscale"):
    """Convert a RenderRequest to a dictionary for YAML serialization."""
    viewport = request.viewport
    return {
        "image": {
            "width": viewport.width,
            "height": viewport.height,
        },
        "location": {
            "upper_left": {
                "re": viewport.upper_left.real,
                "im": viewport.upper_left.imag,
            },
            "lower_right": {
                "re": viewport.lower_right.real,
                "im": viewport.lower_right.imag,
            },
        },
        "computation": {
            "iterations": request.limit,
            "workers": request.workers,
        },
        "presentation": {
            "colormap": colormap,
        },
    }


def dict_to_settings(settings_dict):
    """Convert a dictionary to a (RenderRequest, colormap) pair."""
    try:
        image = settings_dict["image"]
        location = settings_dict["location"]
        upper_left = location["upper_left"]
        lower_right = location["lower_right"]
        computation = settings_dict["computation"]
        viewport = Viewport(
            width=image["width"],
            height=image["height"],
            upper_left=complex(upper_left["re"], upper_left["im"]),
            lower_right=complex(lower_right["re"], lower_right["im"]),
        )
        request = RenderRequest(
            viewport=viewport,
            limit=computation["iterations"],
            workers=computation.get("workers"),
        )
        presentation = settings_dict.get("presentation") or {}  # an empty section keeps the defaults
        colormap = presentation.get("colormap", "grayscale")
    except KeyError as e:
        raise ValueError(f"Missing setting: {e.args[0]}") from e
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Malformed settings: {e}") from e
    return request, colormap


def load_settings(file_path):
    with open(file_path, "r") as file:
        try:
            settings_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ValueError(f"{file_path} is not valid YAML: {e}") from e
    if not isinstance(settings_dict, dict):
        raise ValueError(f"{file_path} does not contain render settings")
    logging.info(f"Settings loaded from {file_path}")
    return dict_to_settings(settings_dict)


def save_settings(file_path, request, colormap="grayscale"):
    settings_dict = settings_to_dict(request, colormap)
    with open(file_path, "w") as file:
        yaml.dump(settings_dict, file, default_flow_style=False)
    logging.info(f"Settings saved to {file_path}")
