from .lane_client import main

main()
