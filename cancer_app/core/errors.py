# cancer_app/core/errors.py


class PredictionAppError(Exception):
    """
    Base error untuk semua kegagalan yang boleh dilihat client.
    message selalu aman untuk dikirim ke client (tanpa detail internal).
    """
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ModelNotReadyError(PredictionAppError):
    # model belum selesai di-load, client boleh retry
    status_code = 503
    message = "Model is not loaded yet"


class MissingInputError(PredictionAppError):
    status_code = 400
    message = "Image file is required"


class InvalidFileTypeError(PredictionAppError):
    status_code = 400
    message = "Invalid file type. Only images are allowed."


class DecodeError(PredictionAppError):
    status_code = 400
    message = "Gambar tidak valid atau formatnya tidak didukung"


class UnsupportedFormatError(PredictionAppError):
    status_code = 400
    message = "Channel gambar tidak bisa dinormalisasi ke RGB"


class PersistenceError(PredictionAppError):
    status_code = 500
    message = "Gagal mengakses penyimpanan data prediksi"


class PredictionError(PredictionAppError):
    # catch-all untuk kegagalan tak terduga saat prediksi
    status_code = 400
    message = "Terjadi kesalahan dalam melakukan prediksi"
