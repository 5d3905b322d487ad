"""Resource graph model, parsed source model and resolution primitives."""
