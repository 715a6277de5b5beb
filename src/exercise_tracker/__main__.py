from exercise_tracker.main import main

main()
