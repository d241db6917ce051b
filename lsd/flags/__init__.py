"""Display flags, each resolved from the command line, the configuration or a default."""