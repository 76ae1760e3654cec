import gradio as gr

from tms_reformatter.handlers import (
    clear_handler,
    count_characters,
    download_csv_handler,
    load_sample_handler,
    transform_handler,
    upload_handler,
)
from tms_reformatter.io_utils import export_dir
from tms_reformatter.logging_setup import configure_logging

# --- UI Definition ---
with gr.Blocks(title="TMS JSON Reformatting Tool") as demo:
    gr.Markdown("# TMS JSON Reformatting Tool")
    gr.Markdown("Transform your TMS JSON data with automatic formatting and export to CSV.")

    status_msg = gr.Textbox(label="Status", interactive=False)

    with gr.Row():
        load_sample_btn = gr.Button("Load Sample Data")
        clear_btn = gr.Button("Clear All", variant="stop")
        file_input = gr.File(label="Upload JSON File", file_types=[".json"])

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### Input JSON")
            input_json = gr.Textbox(
                lines=25,
                max_lines=40,
                show_label=False,
                placeholder="Paste your TMS JSON data here...",
            )
            input_count = gr.Markdown(count_characters(""))

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### Output JSON")
            output_json = gr.Textbox(
                lines=25,
                max_lines=40,
                show_label=False,
                interactive=False,
                show_copy_button=True,
                placeholder="Transformed JSON will appear here...",
            )
            output_count = gr.Markdown(count_characters(""))

    transform_btn = gr.Button("Transform & Generate CSV", variant="primary")

    gr.Markdown("### CSV Output")
    csv_output = gr.Textbox(
        lines=15,
        max_lines=30,
        show_label=False,
        interactive=False,
        show_copy_button=True,
        placeholder="CSV output will appear here...",
    )
    csv_count = gr.Markdown(count_characters(""))
    download_btn = gr.Button("Download CSV")
    download_output = gr.File(label="Download Result")

    load_sample_btn.click(
        fn=load_sample_handler,
        inputs=[],
        outputs=[input_json, status_msg],
    )

    clear_btn.click(
        fn=clear_handler,
        inputs=[],
        outputs=[input_json, output_json, csv_output, status_msg, download_output],
    )

    file_input.upload(
        fn=upload_handler,
        inputs=[file_input],
        outputs=[input_json, status_msg],
    )

    transform_btn.click(
        fn=transform_handler,
        inputs=[input_json],
        outputs=[output_json, csv_output, status_msg],
    )

    download_btn.click(
        fn=download_csv_handler,
        inputs=[csv_output],
        outputs=[download_output, status_msg],
    )

    input_json.change(fn=count_characters, inputs=[input_json], outputs=[input_count])
    output_json.change(fn=count_characters, inputs=[output_json], outputs=[output_count])
    csv_output.change(fn=count_characters, inputs=[csv_output], outputs=[csv_count])


def main():
    configure_logging()
    # Downloads are only served from directories gradio is told about.
    demo.launch(allowed_paths=[export_dir()])


if __name__ == "__main__":
    main()
