from flappyascii.main import main

main()
