"""Hello World: the simplest padawan app.

Demonstrates routes, return-value coercion, path parameters, a view,
and custom fallback and error handlers.

Run as a one-shot CGI-style script:
    REQUEST_METHOD=GET REQUEST_URI=/greet/Luke python app.py
"""

from padawan import App

app = App()


@app.get("/")
def index(ctx):
    return "Hello, World!"


@app.get("/greet/:name")
def greet(ctx):
    return "Hello " + ctx.args["name"]


@app.get("/api/status")
def status(ctx):
    return {"status": "ok", "version": "0.1.0"}


@app.post("/items")
def create_item(ctx):
    ctx.response.set_status(201)
    return {"created": True}


@app.get("/crash")
def crash(ctx):
    raise RuntimeError("the handler fell over")


app.get_view("/about", "<h1>About</h1>")


@app.fallback
def not_found(ctx):
    return f"Nothing at {ctx.request.path}"


@app.error
def on_error(exc):
    return {"error": str(exc)}


if __name__ == "__main__":
    app.run()
