"""Materials, textures and direction PDFs."""
