"""HTTP API boilerplate: controller -> service -> repository request pipeline."""
