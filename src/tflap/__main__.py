from tflap.main import main

main()
