# Density ramp, lightest to darkest (70 characters, index 0 is background)
DENSITY = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

FULL_BLOCK = "█"

# Background plus a solid block for any coverage at or above the midpoint
BLOCKS = " " + FULL_BLOCK

BLOCK_THRESHOLD = 128
