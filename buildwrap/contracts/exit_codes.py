# Process exit codes of the buildwrap entry point. A failing subprocess
# passes its own code through unchanged.
OK = 0
START_FAILED = 127
