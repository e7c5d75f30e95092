"""Split game tileset images into fixed-size tiles."""
