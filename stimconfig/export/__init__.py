"""Export: control-script rendering and text sinks."""
