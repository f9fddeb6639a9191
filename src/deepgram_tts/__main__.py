from deepgram_tts.server import main

main()
