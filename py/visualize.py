import matplotlib.pyplot as plt
import numpy as np
from PIL import Image

from cell_pattern import EMPTY, FILLED, UNCERTAIN

# 白 0，不确定 0.5（灰），黑 1；配合 'binary' colormap 使用
PATTERN_SHADES = {
    EMPTY: 0.0,
    UNCERTAIN: 0.5,
    FILLED: 1.0,
}

# 保存 PNG 时的灰度值：白底，黑格 0，不确定格为中灰
PATTERN_PIXELS = {
    EMPTY: 255,
    UNCERTAIN: 160,
    FILLED: 0,
}


def grid_to_array(grid):
    return np.array([[PATTERN_SHADES[cell] for cell in row] for row in grid], dtype=float)


def visualize_pattern(grid, ax, title=""):
    """
    用 matplotlib 在 ax 上显示三态网格。
    白 -> 白，黑 -> 黑，不确定 -> 灰。
    """
    ax.imshow(grid_to_array(grid), cmap='binary', vmin=0.0, vmax=1.0, interpolation='nearest')
    ax.set_title(title, fontsize=10)
    ax.axis('off')


def show_grid(grid, title=""):
    fig, ax = plt.subplots()
    visualize_pattern(grid, ax, title=title)
    plt.tight_layout()
    plt.show()
    return fig


def save_grid_as_image(grid, out_path, cell_size=10):
    """
    把三态网格存成灰度 PNG。
    cell_size: 每个格子放大成 cell_size x cell_size 像素。
    """
    height = len(grid)
    width = len(grid[0]) if height > 0 else 0
    pixels = np.array([[PATTERN_PIXELS[cell] for cell in row] for row in grid], dtype=np.uint8)
    pixels = pixels.reshape(height, width)
    pixels = np.kron(pixels, np.ones((cell_size, cell_size), dtype=np.uint8))
    img = Image.fromarray(pixels)
    img.save(out_path)
    return img
