import arcade

class ReadyView(arcade.View):
    """Plain text screen shown once a loading sequence has finished."""

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def on_show_view(self):
        self.window.background_color = arcade.color.BLACK

    def on_draw(self):
        self.clear()
        arcade.draw_text(
            self.message,
            self.window.width / 2, self.window.height / 2,
            arcade.color.WHITE, 18,
            anchor_x="center", anchor_y="center",
        )
