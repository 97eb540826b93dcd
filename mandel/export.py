import logging

from PIL import Image

from mandel.colors import apply_colormap


def save_image(file_path, pixels, colormap="grayscale"):
    """Write a rendered buffer to `file_path`; the format follows the file extension."""
    logging.info(f"Exporting fractal to {file_path} with colormap {colormap}...")
    if colormap == "grayscale":
        image = Image.fromarray(pixels)
    else:
        image = Image.fromarray(apply_colormap(pixels, colormap))
    image.save(file_path)
    logging.info(f"Fractal successfully exported to {file_path}.")
