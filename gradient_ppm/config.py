"""Default image settings for the gradient emitter.

Values here match the classic 256x256 "first image" example; the CLI may override
width and height per run.
"""

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256

# P3 header fields
PPM_MAGIC = "P3"
MAX_CHANNEL = 255

# Multiplier used to map a [0.0, 1.0] fraction to an 8-bit channel.
# Truncating 255.999 * 1.0 still gives 255, never 256.
CHANNEL_SCALE = 255.999

DEFAULT_IMAGE = {
    "width": IMAGE_WIDTH,
    "height": IMAGE_HEIGHT,
    "max_channel": MAX_CHANNEL,
}
