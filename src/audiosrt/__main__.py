from audiosrt.cli.app import app

app(prog_name="audio-to-srt")
