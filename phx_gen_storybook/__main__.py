from phx_gen_storybook.cli import app

if __name__ == "__main__":
    app()
