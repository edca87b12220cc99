from hashprobe.cli import main

main(prog_name="hashprobe")
