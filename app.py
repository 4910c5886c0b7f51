import logging
import os

import gradio as gr

from syntax_shift.handlers import (
    convert_handler,
    converter_choices,
    detect_handler,
    export_output_handler,
    load_file_handler,
    select_converter_handler,
    swap_direction_handler,
)
from syntax_shift.registry import DEFAULT_CONVERTER_SLUG, default_input, default_settings

logging.basicConfig(
    level=os.environ.get("SYNTAXSHIFT_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

initial_settings = default_settings(DEFAULT_CONVERTER_SLUG)

# --- UI Definition ---
with gr.Blocks(title="SyntaxShift") as demo:
    gr.Markdown("# SyntaxShift")
    gr.Markdown("Convert between data formats, schemas and code. Everything runs locally, no model involved.")

    with gr.Row():
        converter_selector = gr.Dropdown(
            label="Converter",
            choices=converter_choices(),
            value=DEFAULT_CONVERTER_SLUG,
            interactive=True,
            scale=3,
        )
        swap_btn = gr.Button("Swap direction", scale=1)

    with gr.Row():
        svgo_checkbox = gr.Checkbox(
            label="SVGO optimization",
            value=initial_settings.get("svgo", True),
            visible="svgo" in initial_settings,
        )
        minify_checkbox = gr.Checkbox(
            label="Minify output",
            value=initial_settings.get("minify", False),
            visible="minify" in initial_settings,
        )

    detection_banner = gr.Markdown()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### Input")
            input_text = gr.Textbox(
                label="Input",
                value=default_input(DEFAULT_CONVERTER_SLUG),
                lines=20,
                max_lines=40,
            )
            file_input = gr.File(label="Load from file")

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### Output")
            output_text = gr.Textbox(label="Output", lines=20, max_lines=40, interactive=False)
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            export_btn = gr.Button("Download", variant="primary")
            download_output = gr.File(label="Download Result")

    status_msg = gr.Textbox(label="Status", interactive=False)

    convert_inputs = [converter_selector, input_text, svgo_checkbox, minify_checkbox]

    converter_selector.input(
        fn=select_converter_handler,
        inputs=[converter_selector],
        outputs=[input_text, svgo_checkbox, minify_checkbox],
    )

    converter_selector.change(
        fn=convert_handler,
        inputs=convert_inputs,
        outputs=[output_text, status_msg],
    )

    input_text.change(
        fn=convert_handler,
        inputs=convert_inputs,
        outputs=[output_text, status_msg],
        trigger_mode="always_last",
    )

    input_text.change(
        fn=detect_handler,
        inputs=[input_text, converter_selector],
        outputs=[detection_banner],
        trigger_mode="always_last",
    )

    for checkbox in (svgo_checkbox, minify_checkbox):
        checkbox.change(
            fn=convert_handler,
            inputs=convert_inputs,
            outputs=[output_text, status_msg],
        )

    swap_btn.click(
        fn=swap_direction_handler,
        inputs=[converter_selector, input_text, output_text],
        outputs=[converter_selector, input_text, status_msg],
    )

    file_input.upload(
        fn=load_file_handler,
        inputs=[file_input],
        outputs=[input_text, status_msg],
    )

    export_btn.click(
        fn=export_output_handler,
        inputs=[output_text, converter_selector, output_filename],
        outputs=[download_output, status_msg],
    )

    demo.load(
        fn=convert_handler,
        inputs=convert_inputs,
        outputs=[output_text, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
