"""Models and logging shared by the screening core and the gateway."""
